# cli.py

import sys

from .arguments import UsageError, parse_arguments
from .cdktf_cli import CommandError
from .collector import ConfigCollector
from .console import log, print_error, print_success, print_warning
from .orchestrator import DeploymentOrchestrator
from .prompts import TerminalInput
from .store import ConfigStore
from .validation import GuidanceExit, ValidationError


def main(argv=None):
    """
    Entry point for `ghost-hosting deploy|destroy`.
    Exit codes: 0 on success or guidance exit, 1 on usage/validation/command errors.
    """
    try:
        args = parse_arguments(argv)
    except UsageError as ex:
        print_error(ex.message)
        sys.exit(1)

    input_source = TerminalInput()
    store = ConfigStore(args.config_file)
    collector = ConfigCollector(input_source, store, logger=log)

    try:
        result = collector.collect(
            args.action,
            access_key_id=args.aws_access_key_id,
            secret_access_key=args.aws_secret_access_key,
            region=args.aws_region,
        )
        if args.no_apply:
            print_success(f"Configuration ready for '{result.action}'.")
            sys.exit(0)

        orchestrator = DeploymentOrchestrator(store, input_source, logger=log)
        if not orchestrator.run(result.action):
            sys.exit(1)
    except GuidanceExit as ex:
        print_warning(ex.message)
        sys.exit(0)
    except ValidationError as ex:
        print_error(ex.message)
        sys.exit(1)
    except CommandError as ex:
        print_error(str(ex))
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("Interrupted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
