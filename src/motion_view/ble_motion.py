import asyncio
import logging
import threading

from bleak import BleakClient, BleakScanner
from bleak.exc import BleakError
import asyncio_atexit

from motion_view.codec import decode_sample, encode_config
from motion_view.manager import (
    MotionHandler,
    MotionManager,
    ReferenceFrame,
    SampleError,
    SensorUnavailable,
)
from motion_view.uuids import MOTION_CONFIG, MOTION_SAMPLE, MOTION_SERVICE

logger = logging.getLogger(__name__)


__doc__ = """Fused motion samples from a Bluetooth LE motion peripheral."""


class BleMotionManager(MotionManager):
    """Motion service backed by a Bluetooth LE peripheral advertising
    MOTION_SERVICE, such as a phone or watch companion app.

    Bluetooth traffic runs on an asyncio event loop in a background thread,
    so the handler passed to start_device_motion_updates is called from that
    thread.

    Optional name_filter connects only to peripherals with that string in
    their name (case insensitive)."""

    def __init__(self, name_filter=None, scan_timeout=5.0):
        """Creates a new instance of BleMotionManager. Does not scan for
        Bluetooth devices until availability is first queried."""
        super().__init__()
        self.name_filter = name_filter
        self.scan_timeout = scan_timeout

        self._device = None
        self._scanned = False
        self._client = None
        self._handler = None

        self._event_loop = None
        self._stop_event = None
        self._thread = None
        self._loop_ready = threading.Event()

    @property
    def device_motion_available(self) -> bool:
        """Whether a motion peripheral was found. Scans on first access."""
        if not self._scanned:
            self._device = self._call(self._discover())
            self._scanned = True
        return self._device is not None

    @property
    def device_motion_active(self) -> bool:
        return self._client is not None and self._client.is_connected

    def start_device_motion_updates(
        self, reference_frame: ReferenceFrame, handler: MotionHandler
    ):
        if not self.device_motion_available:
            raise SensorUnavailable("No motion peripheral found")

        self._handler = handler
        self._call(self._connect(reference_frame))

    def stop_device_motion_updates(self):
        if self._thread is None:
            return

        self._call(self._disconnect())
        self._handler = None

        self._event_loop.call_soon_threadsafe(self._stop_event.set)
        self._thread.join()
        self._thread = None
        self._event_loop = None

    # IMPLEMENTATION DETAILS

    def _call(self, coroutine):
        self._ensure_event_loop()
        return asyncio.run_coroutine_threadsafe(coroutine, self._event_loop).result()

    def _ensure_event_loop(self):
        if self._thread is not None:
            return

        self._loop_ready.clear()
        self._thread = threading.Thread(
            target=asyncio.run, args=(self._run(),), daemon=True
        )
        self._thread.start()
        self._loop_ready.wait()

    async def _run(self):
        self._event_loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()

        asyncio_atexit.register(self._disconnect)

        self._loop_ready.set()
        await self._stop_event.wait()

    def _matches(self, device, advertisement_data):
        if MOTION_SERVICE not in advertisement_data.service_uuids:
            return False

        if self.name_filter is None:
            return True

        name = advertisement_data.local_name or device.name or ""
        return self.name_filter.lower() in name.lower()

    async def _discover(self):
        logger.info("Scanning for motion peripherals...")
        try:
            device = await BleakScanner.find_device_by_filter(
                self._matches, timeout=self.scan_timeout
            )
        except (BleakError, OSError) as e:
            # No Bluetooth adapter, adapter powered off, no D-Bus system bus
            logger.info("Bluetooth scan failed: %s", e)
            return None

        if device is not None:
            logger.info("Found %s", device.name or device.address)
        return device

    async def _connect(self, reference_frame):
        client = BleakClient(self._device, disconnected_callback=self._on_disconnected)

        try:
            await client.connect()
            await client.write_gatt_char(
                MOTION_CONFIG,
                encode_config(self.device_motion_update_interval, reference_frame),
                True,
            )
            await client.start_notify(MOTION_SAMPLE, self._on_notification)
        except (BleakError, OSError, asyncio.TimeoutError) as e:
            await client.disconnect()
            raise SensorUnavailable(f"Connecting to motion peripheral failed: {e}") from e

        self._client = client

    async def _disconnect(self):
        client, self._client = self._client, None
        if client is not None:
            await client.disconnect()

    def _on_disconnected(self, client):
        # Disconnects requested through _disconnect have already cleared _client
        if client is not self._client:
            return

        self._client = None
        if (handler := self._handler) is not None:
            handler(None, SampleError("Motion peripheral disconnected"))

    def _on_notification(self, _, data):
        if (handler := self._handler) is None:
            return

        try:
            sample = decode_sample(data)
        except SampleError as e:
            handler(None, e)
            return

        handler(sample, None)
