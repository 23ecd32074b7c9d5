"""Robot-wide settings: ports, gearbox geometry, field size and service options."""

from __future__ import annotations

from enum import Enum


class DevicePort(str, Enum):
    """Physical ports of the brick, identified by their printed label."""

    INPUT_1 = "1"
    INPUT_2 = "2"
    INPUT_3 = "3"
    INPUT_4 = "4"
    OUTPUT_A = "A"
    OUTPUT_B = "B"
    OUTPUT_C = "C"
    OUTPUT_D = "D"

    @property
    def is_input(self) -> bool:
        return self.value.isdigit()

    @property
    def is_output(self) -> bool:
        return not self.is_input


# General behaviour
THROW_ON_ERROR = True
DETAILED_LOGGING = True
DEFAULT_PORT_BASE_PATH = "/sys/class/"

MOTOR_COUNT = 4
SENSOR_COUNT = 4

# Gearbox
PORT_GEARBOX_SHIFT = DevicePort.OUTPUT_D
GEARBOX_GEAR_POSITIONS = (0, 90, 180, 270)
GEARBOX_SHIFT_SPEED = 500
GEARBOX_GEAR_POS_TOLERANCE = 5
GEAR_BLOCKED_TOLERANCE = 5
GEAR_BLOCKED_TIMEOUT_MS = 1000

# Sensors
GYRO_TURN_TOLERANCE = 3
SENSOR_COLOR_RIGHT_OFFSET = (0, 0)
SENSOR_COLOR_LEFT_OFFSET = (0, 0)
SENSOR_COLOR_FRONT_OFFSET = (0, 0)
COLOR_SENSOR_TRIGGER = 42
COLOR_SENSOR_USE_RGB_MODE = False
COLOR_SENSOR_TRIGGER_RGB = (42, 42, 42)

# Chassis and playing field
MOTOR_WHEELBASE = 0
FIELD_WIDTH = 2000
FIELD_HEIGHT = 1000

# Destinations
DESTINATIONS_FILE_PATH = "./destinations.list"

# Path computation runs in-process; no network service is started.
COMPUTE_TCP_ENABLED = False

# Display
DISPLAY_ENABLED = True
DISPLAY_COLOR = True
DISPLAY_USE_FREETYPE = False
ENABLE_USE_BITMAPS = True

# Web server
WEBSERVER_ENABLED = True
WEBSERVER_PORT = 8080
WEBSERVER_HOST = "localhost"