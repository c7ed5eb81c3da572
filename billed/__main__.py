from billed.cli.app import main_menu
from billed.logging import configure_logging
from billed.settings import settings
from billed.stores.factory import get_store


def main() -> None:
    configure_logging()
    main_menu(get_store(), settings.session())


if __name__ == "__main__":
    main()
