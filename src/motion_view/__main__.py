from motion_view.app import main

main()
