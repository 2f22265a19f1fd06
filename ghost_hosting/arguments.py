# arguments.py

import argparse

from .constants import ALLOWED_ACTIONS, CONFIG_FILE


class UsageError(Exception):
    """The command line itself is wrong (e.g. an unknown action)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ghost-hosting",
        description="Deploy or destroy a Ghost blog on AWS (VPC, RDS, ALB, ECS/Fargate, S3, CloudFront).",
    )
    parser.add_argument("action", help=f"Action to perform: {' | '.join(ALLOWED_ACTIONS)}")
    parser.add_argument("--aws-access-key-id", default=None, help="AWS Access Key Id")
    parser.add_argument("--aws-secret-access-key", default=None, help="AWS Secret Access Key")
    parser.add_argument("--aws-region", default=None, help="AWS Region")
    parser.add_argument(
        "--config-file",
        default=CONFIG_FILE,
        help=f"Where to read/write the deployment configuration (default {CONFIG_FILE})",
    )
    parser.add_argument(
        "--no-apply",
        action="store_true",
        help="Only collect and save the configuration; do not run cdktf",
    )
    return parser


def parse_arguments(argv=None):
    """
    Parse the command line. Unknown options are ignored.
    Raises UsageError when the action is not one of the allowed actions.
    """
    args, _unknown = build_parser().parse_known_args(argv)
    if args.action not in ALLOWED_ACTIONS:
        raise UsageError(f"Invalid action argument : {args.action}")
    return args
