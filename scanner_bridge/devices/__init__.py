from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.factory import DeviceResolverFactory
from scanner_bridge.devices.models import Device

__all__ = ["BaseDeviceResolver", "Device", "DeviceResolverFactory"]
