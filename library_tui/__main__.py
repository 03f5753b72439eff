"""Entry point for library-tui."""

from library_tui.app import LibraryApp
from library_tui.config import get_config
from library_tui.logging_config import setup_logging


def main() -> None:
    """Run the library-tui application."""
    config = get_config()
    setup_logging(config.log_path)
    app = LibraryApp(config)
    app.run()


if __name__ == "__main__":
    main()
