__doc__ = """
GATT related UUIDs of the motion peripheral.

MOTION_SERVICE is advertised by the peripheral and used for scanning.
MOTION_CONFIG is written once per connection, MOTION_SAMPLE notifies one
fused sample per sampling interval.
"""

MOTION_SERVICE = "5b3e1a40-8c2d-4f6e-9a71-3d0c2b8e5f10"
MOTION_SAMPLE = "5b3e1a41-8c2d-4f6e-9a71-3d0c2b8e5f10"
MOTION_CONFIG = "5b3e1a42-8c2d-4f6e-9a71-3d0c2b8e5f10"
