from flask import Flask

from scanner_bridge.api.app import create_app
from scanner_bridge.config.settings import Settings
from scanner_bridge.database.connection import close_pool, init_pool
from scanner_bridge.database.repositories.scan_record_repository import ScanRecordRepository
from scanner_bridge.devices.factory import DeviceResolverFactory
from scanner_bridge.logging.logger import Log
from scanner_bridge.naps2.console import Naps2Console
from scanner_bridge.pdf.factory import DocumentAssemblerFactory
from scanner_bridge.processor.archiver import DocumentArchiver
from scanner_bridge.processor.scan_processor import ScanProcessor
from scanner_bridge.profiles.synchronizer import ProfileSynchronizer


def build_app(settings: Settings) -> Flask:
    """Wire every component from settings into a Flask app."""
    console = Naps2Console(settings.naps2_path)
    resolver = DeviceResolverFactory.create(settings, console)
    synchronizer = ProfileSynchronizer(settings, resolver)
    scan_processor = ScanProcessor(console, synchronizer, settings)
    archiver = DocumentArchiver(
        ScanRecordRepository(),
        DocumentAssemblerFactory.create(settings),
        settings,
    )
    return create_app(scan_processor, archiver)


def main() -> None:
    """Entry point: settings -> logging -> pool -> HTTP server."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        app = build_app(settings)
        Log.info(f"Scanner bridge listening on http://{settings.http_host}:{settings.http_port}")
        app.run(host=settings.http_host, port=settings.http_port, threaded=True)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
