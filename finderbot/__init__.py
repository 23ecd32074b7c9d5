"""Grid path planning, an in-memory display and a fake sysfs tree for an EV3 robot."""

__version__ = "0.1.0"