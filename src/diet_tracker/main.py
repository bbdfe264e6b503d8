"""Console entrypoint for the diet tracker."""

from diet_tracker.app_logging import configure_logging
from diet_tracker.cli.prompts import Prompter
from diet_tracker.cli.shell import DietTrackerShell
from diet_tracker.config import Settings
from diet_tracker.containers import build_container


def main(settings: Settings | None = None, prompter: Prompter | None = None) -> None:
    """Load stored data and run the interactive shell."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    container = build_container(resolved_settings)
    shell = DietTrackerShell(container, prompter=prompter or Prompter())
    shell.run()


if __name__ == "__main__":
    main()
