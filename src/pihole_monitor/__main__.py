"""
Entry point for the pihole-monitor CLI.

Usage:
    pihole-monitor                    Show the menu (interactive) or refresh once
    pihole-monitor --action refresh   Refresh now, skip the menu
    pihole-monitor --serve            Refresh on a schedule until interrupted
    pihole-monitor --set-password     Store the admin password
    pihole-monitor --reset-password   Remove the stored admin password
    pihole-monitor --clear-cache      Remove the cached statistics
    pihole-monitor --version          Show version and exit

Exit Codes:
    0 - Success
    1 - Configuration error (invalid settings, missing required values)
"""

from __future__ import annotations

import argparse
import getpass
import signal
import sys
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from types import FrameType

from pihole_monitor import __version__
from pihole_monitor.cache import SampleStore
from pihole_monitor.config import ConfigurationError, PiholeSettings, get_config, load_config
from pihole_monitor.logging import configure_logging, get_logger
from pihole_monitor.models import FormFactor
from pihole_monitor.orchestrator import RefreshOrchestrator
from pihole_monitor.render import Renderer, RenderOptions, failure_notice
from pihole_monitor.scheduler import ScheduledRunner
from pihole_monitor.secrets import CredentialProvider, FileSecretStore, SecretStoreError

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1

# Trigger parameter meaning "refresh now, skip any interactive menu"
REFRESH_ACTION = "refresh"


class MenuAction(str, Enum):
    """Choices of the interactive menu."""

    REFRESH = "refresh"
    CHANGE_PASSWORD = "change_password"
    CLEAR_CACHE = "clear_cache"
    CANCEL = "cancel"


MENU_ENTRIES = [
    ("1", MenuAction.REFRESH, "Refresh (fetch from API)"),
    ("2", MenuAction.CHANGE_PASSWORD, "Change password"),
    ("3", MenuAction.CLEAR_CACHE, "Clear cache"),
    ("0", MenuAction.CANCEL, "Cancel"),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pihole-monitor",
        description="Pi-hole statistics with cache fallback and health status",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   Success
  1   Configuration error

Environment Variables:
  CONFIG_PATH             Path to YAML configuration file
  PIHOLE_BASE_URL         Pi-hole base URL, e.g. http://192.168.178.10
  PIHOLE_PASSWORD         Fallback admin password
  PIHOLE_PASSWORD_FILE    Path to file containing the password (Docker secrets)
  PIHOLE_STATE_DIR        Directory of the secret store (default: ~/.pihole-monitor)
  PIHOLE_REFRESH_HOURS    Interval of scheduled refreshes (default: 6)
  PIHOLE_LOCALE           de_DE or en_US
  PIHOLE_LOG_LEVEL        Logging level: DEBUG, INFO, WARNING, ERROR
  PIHOLE_LOG_FORMAT       Log format: json or text

Examples:
  # Refresh once without the menu, large layout
  pihole-monitor --action refresh --form-factor large

  # Unattended, every 6 hours
  PIHOLE_BASE_URL=http://192.168.178.10 pihole-monitor --serve
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to YAML configuration file (overrides CONFIG_PATH)",
    )
    parser.add_argument(
        "--action",
        choices=[REFRESH_ACTION],
        help="'refresh' refreshes immediately and skips the interactive menu",
    )
    parser.add_argument(
        "--form-factor",
        choices=[f.value for f in FormFactor],
        help="Layout size (default: large on a terminal, otherwise from configuration)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--serve",
        action="store_true",
        help="Refresh every PIHOLE_REFRESH_HOURS until interrupted",
    )
    mode.add_argument(
        "--set-password",
        action="store_true",
        help="Prompt for the admin password and store it",
    )
    mode.add_argument(
        "--reset-password",
        action="store_true",
        help="Remove the stored admin password",
    )
    mode.add_argument(
        "--clear-cache",
        action="store_true",
        help="Remove the cached statistics",
    )
    return parser.parse_args(argv)


def handle_sighup(signum: int, frame: Optional[FrameType]) -> None:
    """Handle SIGHUP signal for configuration reload."""
    from pihole_monitor.config.loader import reload_config

    log = get_logger()
    log.info("received_sighup", action="reloading configuration")
    try:
        reload_config()
        log.info("config_reloaded", status="success")
    except (ConfigurationError, SystemExit) as e:
        log.error("config_reload_failed", error=str(e))


def present_menu(input_func: Callable[[str], str] = input) -> MenuAction:
    """Show the interactive menu and return the chosen action.

    Unknown input and end-of-input count as cancel.
    """
    print("Pi-hole Monitor")
    for key, _, label in MENU_ENTRIES:
        print(f"  [{key}] {label}")
    try:
        choice = input_func("Select an action: ").strip()
    except EOFError:
        return MenuAction.CANCEL
    for key, action, _ in MENU_ENTRIES:
        if choice == key:
            return action
    return MenuAction.CANCEL


def prompt_password(
    credentials: CredentialProvider,
    prompt_func: Callable[[str], str] = getpass.getpass,
) -> bool:
    """Ask for the admin password and store it.

    Returns:
        True when a password was stored.
    """
    try:
        secret = prompt_func("Pi-hole admin password: ")
    except EOFError:
        secret = ""
    try:
        credentials.set(secret)
    except ValueError:
        print("Empty password entered.", file=sys.stderr)
        return False
    except SecretStoreError as e:
        print(f"Cannot store password: {e}", file=sys.stderr)
        return False
    return True


def build_components(config: PiholeSettings):
    """Wire the secret store, credential provider, cache and orchestrator."""
    secret_store = FileSecretStore(config.secrets_file)
    credentials = CredentialProvider(
        secret_store, key=config.password_key, fallback=config.password
    )
    sample_store = SampleStore(secret_store, key=config.cache_key)
    orchestrator = RefreshOrchestrator.from_settings(config, secret_store)
    return credentials, sample_store, orchestrator


def run_refresh(
    orchestrator: RefreshOrchestrator,
    renderer: Renderer,
    form_factor: str,
    interactive: bool,
) -> None:
    """Run one refresh cycle and print the rendered result.

    Interactive runs print the failure cause to stderr when the fetch
    failed; unattended runs only log it.
    """
    result = orchestrator.refresh()
    if interactive and result.error:
        print(failure_notice(result.error, renderer.options.locale), file=sys.stderr)
    print(renderer.render(result, form_factor), end="", flush=True)


def run_scheduled_refresh() -> None:
    """Scheduler job: one unattended refresh with the current configuration."""
    config = get_config()
    _, _, orchestrator = build_components(config)
    renderer = Renderer(RenderOptions.from_settings(config))
    run_refresh(orchestrator, renderer, config.form_factor, interactive=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pihole-monitor CLI.

    Returns:
        Exit code (0 for success, 1 for configuration errors).
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(log_format=config.log_format, log_level=config.log_level)
    log = get_logger()

    credentials, sample_store, orchestrator = build_components(config)

    if args.set_password:
        return EXIT_SUCCESS if prompt_password(credentials) else EXIT_CONFIG_ERROR
    if args.reset_password:
        credentials.reset()
        return EXIT_SUCCESS
    if args.clear_cache:
        sample_store.clear()
        return EXIT_SUCCESS

    if args.serve:
        log.info("serve_mode", refresh_hours=config.refresh_hours)
        signal.signal(signal.SIGHUP, handle_sighup)
        ScheduledRunner(timezone=config.display_timezone).run_interval(
            run_scheduled_refresh, config.refresh_hours
        )
        return EXIT_SUCCESS

    interactive = sys.stdin.isatty()
    show_menu = interactive and args.action != REFRESH_ACTION
    # Interactive previews show every counter unless a layout is requested
    default_layout = FormFactor.LARGE.value if interactive else config.form_factor
    form_factor = args.form_factor or default_layout

    if show_menu:
        action = present_menu()
        if action == MenuAction.CHANGE_PASSWORD:
            credentials.reset()
            prompt_password(credentials)
        elif action == MenuAction.CLEAR_CACHE:
            sample_store.clear()
        # Cancel still shows whatever data the refresh yields

    if interactive and not credentials.is_available():
        prompt_password(credentials)

    renderer = Renderer(RenderOptions.from_settings(config))
    run_refresh(orchestrator, renderer, form_factor, interactive=interactive)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
