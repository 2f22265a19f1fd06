# validation.py

from .constants import HTTPS_SCHEME, MIN_SUBNETS, NO, YES
from .urls import (
    get_domain_from_url,
    get_path_suffix_from_url,
    get_root_domain_from_url,
    get_scheme,
    strip_trailing_slashes,
)

INVALID_OPTION = "Invalid option!"


class ValidationError(Exception):
    """A user-supplied value is missing or inconsistent. Fatal for the run."""

    def __init__(self, message: str = INVALID_OPTION):
        super().__init__(message)
        self.message = message


class GuidanceExit(Exception):
    """
    The run cannot continue, but nothing went wrong: the user has to fix a
    precondition outside this tool first. Exits with status 0.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_required(value, message: str = None):
    """Raise ValidationError when value is None or empty; return it otherwise."""
    if value is None or value == "":
        raise ValidationError(message or INVALID_OPTION)
    return value


def validate_yes_no(answer, default: str = NO) -> str:
    """
    Normalize a yes/no answer to 'y' or 'n'.
    An empty answer takes the prompt default; anything else is rejected.
    """
    answer = (answer or "").strip().lower()
    if answer == "":
        answer = default
    if answer not in (YES, NO):
        raise ValidationError(INVALID_OPTION)
    return answer


def split_subnets(raw: str) -> list:
    """'subnet-a, subnet-b,' -> ['subnet-a', 'subnet-b']"""
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def validate_subnets(subnets: list, label: str = "VPC Subnets"):
    if len(subnets) < MIN_SUBNETS:
        raise ValidationError(f"At least {MIN_SUBNETS} {label} required.")
    return subnets


def validate_urls(ghost_hosting_url: str, host_static_website: bool, static_website_url: str):
    """
    Cross-field URL checks:
      - both URLs use https
      - both URLs share the same path suffix
      - both URLs have a non-empty domain
      - both URLs share the same registrable (root) domain
    The static URL only takes part when static hosting is enabled.
    """
    hosting_url = strip_trailing_slashes(ghost_hosting_url or "")
    static_url = strip_trailing_slashes(static_website_url or "")

    if get_scheme(hosting_url) != HTTPS_SCHEME or (
        host_static_website and get_scheme(static_url) != HTTPS_SCHEME
    ):
        raise ValidationError('Invalid url scheme! It has to be "https"')

    if host_static_website and get_path_suffix_from_url(hosting_url) != get_path_suffix_from_url(static_url):
        raise ValidationError(
            "URL path should be same for Ghost hosting url and Static website url."
        )

    if get_domain_from_url(hosting_url) == "" or (
        host_static_website and get_domain_from_url(static_url) == ""
    ):
        raise ValidationError(
            "Domain name should be valid for Ghost hosting url and Static website url."
        )

    if host_static_website:
        hosting_root = get_root_domain_from_url(hosting_url)
        static_root = get_root_domain_from_url(static_url)
        if hosting_root is None or hosting_root != static_root:
            raise ValidationError(
                "Different domain names for Ghost hosting url and Static website url are not allowed."
            )


def validate_config(config):
    """
    Validate a fully assembled DeploymentConfig.
    Raises ValidationError on the first failing check; returns the config otherwise.
    """
    aws = config.aws
    for value in (aws.access_key_id, aws.secret_access_key, aws.region):
        validate_required(value)

    if config.vpc.use_existing_vpc:
        validate_subnets(config.vpc.vpc_subnets, "VPC Subnets")
        if not config.alb.use_existing_alb:
            validate_subnets(config.vpc.vpc_public_subnets, "VPC Public Subnets")

    validate_urls(
        config.ghost_hosting_url,
        config.host_static_website,
        config.static_website_url,
    )
    return config
