"""
Practice Review - Main Entry Point

Browse incorrectly answered practice questions by section, page through
them and review each one (status and notes).

Usage:
    python -m practice_review.main
"""

import sys
from PyQt6.QtWidgets import QApplication

from .config import Config
from .events.event_bus import get_event_bus
from .services.localization_service import get_localization_service
from .services.navigation_service import get_navigation_service
from .services.record_store import RecordStore
from .services.repositories import create_sample_repository
from .services.review_modal_controller import ReviewModalController
from .services.task_runner import get_task_runner
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    # Initialize singletons on the GUI thread
    get_event_bus()
    get_task_runner()
    get_localization_service()

    return app


def main():
    """
    Main entry point for Practice Review

    Creates the application, wires the store and review controller into the
    main window, starts the initial load and runs the event loop.
    """
    LoggingConfig.setup_logging(Config.get_logs_directory())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")

    app = setup_application()

    event_bus = get_event_bus()
    runner = get_task_runner()
    repository = create_sample_repository()

    store = RecordStore(repository, runner=runner)
    modal_controller = ReviewModalController(
        store,
        note_repository=repository,
        status_repository=repository,
        runner=runner,
        event_bus=event_bus,
    )

    navigation = get_navigation_service()
    # Standalone: leaving the error list closes the window
    navigation.navigation_requested.connect(lambda _target: app.closeAllWindows())

    from .widgets.main_window import PracticeErrorWindow
    window = PracticeErrorWindow(store, modal_controller, navigation=navigation, event_bus=event_bus)
    window.show()

    store.load()
    logger.info("Application started successfully!")

    exit_code = app.exec()
    runner.wait_for_done(2000)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
