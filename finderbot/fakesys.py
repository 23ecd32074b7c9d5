"""A fake device-class tree on disk that mimics the brick's sensors and motors."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .config import DevicePort

logger = logging.getLogger(__name__)

AttributeValue = Union[str, int, Iterable[Union[str, int]]]

VALUE_FILE_COUNT = 10

_SENSOR_DEFAULTS: dict[str, AttributeValue] = {
    "mode": "GYRO-ANG",
    "modes": "GYRO-ANG GYRO-RATE GYRO-FAS",
    "num_values": 1,
    "poll_ms": 10,
    "command": "",
    "commands": "GYRO-ANG GYRO-RATE GYRO-FAS GYRO-G&A GYRO-CAL",
}

_MOTOR_DEFAULTS: dict[str, AttributeValue] = {
    "command": "",
    "commands": [
        "run-forever", "run-to-abs-pos", "run-to-rel-pos",
        "run-timed", "run-direct", "stop", "reset",
    ],
    "count_per_rot": 360,
    "duty_cycle": 0,
    "duty_cycle_sp": 0,
    "polarity": "normal",
    "position": 92,
    "position_sp": 0,
    "max_speed": 1050,
    "speed": 0,
    "speed_sp": 0,
    "ramp_up_sp": 0,
    "ramp_down_sp": 0,
    "state": "running",
    "stop_action": "hold",
    "stop_actions": ["coast", "brake", "hold"],
    "time_sp": 0,
}


class Device(Enum):
    """The devices the fake tree provides, with their directory and port."""

    GYRO = ("lego-sensor/sensor0", DevicePort.INPUT_1)
    COLOR_LEFT = ("lego-sensor/sensor1", DevicePort.INPUT_2)
    COLOR_RIGHT = ("lego-sensor/sensor2", DevicePort.INPUT_3)
    COLOR_FRONT = ("lego-sensor/sensor3", DevicePort.INPUT_4)
    MOTOR_LEFT = ("tacho-motor/motor0", DevicePort.OUTPUT_A)
    MOTOR_RIGHT = ("tacho-motor/motor1", DevicePort.OUTPUT_B)
    MOTOR_SHIFT = ("tacho-motor/motor2", DevicePort.OUTPUT_C)
    MOTOR_TOOL = ("tacho-motor/motor3", DevicePort.OUTPUT_D)

    @property
    def relative_path(self) -> str:
        return self.value[0]

    @property
    def port(self) -> DevicePort:
        return self.value[1]

    @property
    def is_sensor(self) -> bool:
        return self.port.is_input

    @property
    def is_motor(self) -> bool:
        return self.port.is_output

    @property
    def address(self) -> str:
        kind = "in" if self.is_sensor else "out"
        return f"ev3-ports:{kind}{self.port.value}"

    @classmethod
    def for_port(cls, port) -> "Device":
        """Return the device attached to ``port``; raise ValueError for unknown ports."""
        try:
            wanted = DevicePort(port)
        except ValueError:
            raise ValueError(f"Requested port is out of range: {port!r}") from None
        return next(device for device in cls if device.port is wanted)


def _format(value: AttributeValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return "".join(f"{item} " for item in value)


class FakeSys:
    """Creates, edits and removes a fake sysfs tree for tests and simulation.

    Usable as a context manager: entering initialises the tree, leaving removes it.
    """

    def __init__(self, base_path: Union[str, Path] = "./fakesys") -> None:
        self.base_path = Path(base_path)
        self.initialized = False
        self.partial = False

    def __enter__(self) -> "FakeSys":
        self.init()
        return self

    def __exit__(self, *exc_info) -> None:
        self.deinit()

    # -- lifecycle -------------------------------------------------------

    def init(self) -> None:
        """Create the tree with default files; an existing tree is left as it is."""
        if self.base_path.exists():
            logger.info("FakeSys already initialized, skipping init")
            self.initialized = True
            self.partial = True
            return

        self.base_path.mkdir(parents=True)
        for device in Device:
            self._device_path(device).mkdir(parents=True, exist_ok=True)
        if not all(self._device_path(device).is_dir() for device in Device):
            raise RuntimeError(f"Could not create directories in: {self.base_path}")

        for device in Device:
            if device.is_sensor:
                self._init_sensor(device)
            else:
                self._init_motor(device)

        self.partial = False
        self.initialized = True

    def deinit(self) -> None:
        """Remove the whole tree."""
        if self.base_path.exists():
            shutil.rmtree(self.base_path)
        self.initialized = False

    def reinit(self) -> None:
        """Remove the tree and create it afresh."""
        self.deinit()
        self.init()

    def device_dir(self, port) -> Path:
        """Return the directory of the device attached to ``port``."""
        return self._device_path(Device.for_port(port))

    # -- sensors ---------------------------------------------------------

    def set_sensor_value(self, device: Device, value: int, index: int) -> None:
        if index < 0:
            raise ValueError(f"value index must not be negative: {index}")
        self._write(self._require_sensor(device), f"value{index}", value)

    def set_sensor_mode(self, device: Device, mode: str) -> None:
        self._write(self._require_sensor(device), "mode", mode)

    def set_sensor_modes(self, device: Device, modes: Iterable[str]) -> None:
        self._write(self._require_sensor(device), "modes", list(modes))

    def set_sensor_num_values(self, device: Device, num_values: int) -> None:
        self._write(self._require_sensor(device), "num_values", num_values)

    def set_sensor_poll_ms(self, device: Device, poll_ms: int) -> None:
        self._write(self._require_sensor(device), "poll_ms", poll_ms)

    # -- motors ----------------------------------------------------------

    def set_motor_attribute(self, device: Device, name: str, value: AttributeValue) -> None:
        """Write one of the motor's attribute files, such as ``speed_sp`` or ``state``."""
        motor = self._require_motor(device)
        if name not in _MOTOR_DEFAULTS:
            raise ValueError(f"unknown motor attribute: {name!r}")
        self._write(motor, name, value)

    def read_attribute(self, device: Device, name: str) -> str:
        """Return the first line of a device attribute file."""
        path = self._attribute_path(device, name)
        with path.open(encoding="utf-8") as handle:
            return handle.readline().rstrip("\n")

    def simulate_motor_movement(
        self,
        device: Device,
        end_state: str,
        callback: Optional[Callable[[], None]] = None,
    ) -> bool:
        """Play out a pending ``run-to-abs-pos`` command on a motor.

        The position counts up towards ``position_sp``, then the state is set to
        ``end_state`` and ``callback`` is called. Returns False if no such
        command is pending.
        """
        motor = self._require_motor(device)
        if self.read_attribute(motor, "command") != "run-to-abs-pos":
            return False

        destination = int(self.read_attribute(motor, "position_sp"))
        position = int(self.read_attribute(motor, "position"))
        while position < destination:
            position += 1
            self._write(motor, "position", position)
        self._write(motor, "state", end_state)
        if callback is not None:
            callback()
        return True

    # -- disconnection ---------------------------------------------------

    def disconnect(self, device: Device) -> None:
        """Remove a device's directory, as if it were unplugged."""
        path = self._device_path(device)
        if path.exists():
            shutil.rmtree(path)
        if path.exists():
            raise RuntimeError(f"Could not delete directory: {path}")

    def disconnect_all(self) -> None:
        """Remove every device together with the base directory."""
        if self.base_path.exists():
            shutil.rmtree(self.base_path)
        if self.base_path.exists():
            raise RuntimeError(f"Could not delete directory: {self.base_path}")

    # -- helpers ---------------------------------------------------------

    def _device_path(self, device: Device) -> Path:
        return self.base_path / device.relative_path

    def _attribute_path(self, device: Device, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"invalid attribute name: {name!r}")
        return self._device_path(device) / name

    @staticmethod
    def _require_sensor(device: Device) -> Device:
        if not device.is_sensor:
            raise ValueError(f"{device.name} is not a sensor")
        return device

    @staticmethod
    def _require_motor(device: Device) -> Device:
        if not device.is_motor:
            raise ValueError(f"{device.name} is not a motor")
        return device

    def _write(self, device: Device, name: str, value: AttributeValue) -> None:
        text = _format(value)
        path = self._attribute_path(device, name)
        path.write_text(text, encoding="utf-8")
        with path.open(encoding="utf-8") as handle:
            written = handle.readline().rstrip("\n")
        if written != text:
            raise RuntimeError(f"Could not write to file: {path}")

    def _init_sensor(self, device: Device) -> None:
        self._write(device, "address", device.address)
        for name, value in _SENSOR_DEFAULTS.items():
            self._write(device, name, value)
        for index in range(VALUE_FILE_COUNT):
            self._write(device, f"value{index}", 0)

    def _init_motor(self, device: Device) -> None:
        self._write(device, "address", device.address)
        for name, value in _MOTOR_DEFAULTS.items():
            self._write(device, name, value)