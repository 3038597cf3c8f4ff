from __future__ import annotations

"""
Launcher Application Controller.

Orchestrates one launch: logging bootstrap, configuration loading,
core file verification, runtime discovery and chipset resolution,
argument planning and finally spawning the application. Every fatal
condition is reported to the user and mapped to a distinct exit code.
"""

import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from iseries_launcher.core.arguments.planner import detect_shell_flag, filter_arguments
from iseries_launcher.core.config.validator import validate_config
from iseries_launcher.core.launch.planner import build_launch_descriptor
from iseries_launcher.core.runtime.locator import RuntimeLocator
from iseries_launcher.core.runtime.resolver import parse_chipset_from_args, resolve_chipset
from iseries_launcher.core.verification.verifier import verify_structure
from iseries_launcher.domain import constants as const
from iseries_launcher.domain.chipset import Chipset
from iseries_launcher.domain.config import get_config_path, load_config
from iseries_launcher.domain.exit_codes import ExitCode
from iseries_launcher.domain.file_structure import FileStructure
from iseries_launcher.domain.settings import RuntimeSettings, build_runtime_settings
from iseries_launcher.infra.fs import get_launch_dir, join_relative
from iseries_launcher.infra.host import is_64bit_host
from iseries_launcher.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from iseries_launcher.infra.process import ProcessSpawner
from iseries_launcher.interface.notifier import Notifier, create_notifier
from iseries_launcher.utils.i18n import i18n

logger = get_logger(__name__)

_FAILURE_MESSAGES = {
    ExitCode.NO_RUNTIME: "launcher.errors.no_runtime",
    ExitCode.NO_X32_RUNTIME: "launcher.errors.no_x32_runtime",
}

# -----------------------------------------------------------------------------
# LAUNCH CONTEXT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LaunchContext:
    """
    Everything the launch sequence reads, gathered once at startup.

    Attributes:
        launch_dir: Directory the launcher operates from.
        args: Raw command-line arguments (without the program name).
        settings: Immutable runtime settings.
        structure: Expected core file layout.
        is_64bit_host: Host operating system width.
    """
    launch_dir: str
    args: List[str]
    settings: RuntimeSettings
    structure: FileStructure
    is_64bit_host: bool

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[Sequence[str]] = None,
        *,
        launch_dir: Optional[str] = None,
        notifier: Optional[Notifier] = None,
        spawner: Optional[ProcessSpawner] = None,
) -> int:
    """
    Execute the complete launch procedure.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].
        launch_dir: Installation directory. Defaults to get_launch_dir().
        notifier: User notification sink. Chosen from config when None.
        spawner: Process spawner. A ProcessSpawner when None.

    Returns:
        int: Process exit code (see ExitCode).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    base_dir = os.path.abspath(launch_dir or get_launch_dir())

    # 1. Diagnostics bootstrap, before the override file is read
    bootstrap_log = LoggingConfig(console=True, log_file=get_default_log_path())
    configure_logging(bootstrap_log)

    # 2. Configuration
    raw_conf = load_config(get_config_path(base_dir))
    clean_conf, warnings = validate_config(raw_conf)

    configure_logging(
        bootstrap_log.reconfigured(clean_conf["log_level"], clean_conf["log_to_file"]),
        force=True,
    )

    if clean_conf["locale"] != i18n.locale:
        i18n.load_locale(clean_conf["locale"])

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    context = LaunchContext(
        launch_dir=base_dir,
        args=args,
        settings=build_runtime_settings(clean_conf),
        structure=FileStructure.from_mapping(clean_conf["core_files"]),
        is_64bit_host=is_64bit_host(),
    )
    notifier = notifier or create_notifier(clean_conf["show_dialogs"])

    try:
        return run_launch(context, notifier, spawner or ProcessSpawner())
    except KeyboardInterrupt:
        logger.warning("Launch interrupted by the user.")
        return int(ExitCode.INTERRUPTED)


def run_launch(context: LaunchContext, notifier: Notifier, spawner: ProcessSpawner) -> int:
    """
    Run the launch sequence for an already assembled context.

    Args:
        context: Settings, structure and environment of this launch.
        notifier: Receives warnings and fatal errors.
        spawner: Starts the application process.

    Returns:
        int: Process exit code.
    """
    _log_startup(context)

    # 3. Core file verification (never fatal)
    report = verify_structure(context.structure, context.launch_dir, notifier)
    if not report.complete:
        logger.warning(f"{len(report.missing)} core file(s) missing. Continuing launch.")

    # 4. Runtime discovery
    jre_x32 = RuntimeLocator(join_relative(context.launch_dir, context.settings.jre32_path))
    jre_x64 = RuntimeLocator(join_relative(context.launch_dir, context.settings.jre64_path))

    has_x32 = jre_x32.check()
    logger.info(f"Has x32 JRE: {has_x32}")
    has_x64 = jre_x64.check()
    logger.info(f"Has x64 JRE: {has_x64}")

    # 5. Chipset resolution
    resolution = resolve_chipset(
        has_x32,
        has_x64,
        context.is_64bit_host,
        parse_chipset_from_args(context.args),
    )
    for key in resolution.warnings:
        notifier.warn(i18n.t(key))

    if not resolution.ok:
        failure = resolution.failure
        notifier.error(i18n.t(_FAILURE_MESSAGES[failure]))
        logger.critical(f"Launch aborted: {failure.description} (exit code {int(failure)})")
        return int(failure)

    runtime = jre_x64 if resolution.chipset is Chipset.X64 else jre_x32

    # 6. Argument planning
    descriptor = build_launch_descriptor(
        context.settings,
        runtime.executable_path,
        context.launch_dir,
        filter_arguments(context.args),
        with_shell=detect_shell_flag(context.args),
    )

    # 7. Spawn
    try:
        spawner.spawn(descriptor)
    except OSError as e:
        logger.critical(f"Couldn't start process: {e}", exc_info=True)
        notifier.error(i18n.t("launcher.errors.start_failure", error=str(e)))
        return int(ExitCode.START_FAILURE)

    return int(ExitCode.NORMAL)

# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

def _log_startup(context: LaunchContext) -> None:
    """Record the environment the launch decisions are based on."""
    logger.info(f"{const.APP_NAME} launcher v{const.LAUNCHER_VERSION}")
    logger.info(f"Starting from directory: {context.launch_dir}")
    logger.info(f"Cpu architecture: {'x64' if context.is_64bit_host else 'x32'}")

    if context.args:
        logger.info(f"Command line arguments: {' | '.join(context.args)}")
    else:
        logger.info("Command line arguments: None")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
