# collector.py

import time

from .arguments import parse_arguments
from .config import AlbConfig, AwsCredentials, DeploymentConfig, RdsConfig, VpcConfig
from .console import log
from .constants import ACTION_DESTROY, NO, YES
from .urls import strip_trailing_slashes
from .validation import (
    GuidanceExit,
    split_subnets,
    validate_config,
    validate_required,
    validate_yes_no,
)


class ConfigBuilder:
    """
    Accumulates answers while the questions are asked.
    Passed into and returned from every collection step.
    """

    def __init__(self, access_key_id=None, secret_access_key=None, region=None):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.region = region

        self.use_existing_vpc = False
        self.vpc_subnets = []
        self.vpc_public_subnets = []

        self.use_existing_alb = False
        self.listener_arn = None

        self.ghost_hosting_url = ""
        self.host_static_website = False
        self.static_website_url = ""

        self.use_existing_rds = False
        self.rds_host = None
        self.rds_db_user_name = None
        self.rds_db_password = None
        self.rds_db_name = None

    def build(self, unique_identifier: str = None) -> DeploymentConfig:
        return DeploymentConfig(
            aws=AwsCredentials(self.access_key_id, self.secret_access_key, self.region),
            vpc=VpcConfig(
                use_existing_vpc=self.use_existing_vpc,
                vpc_subnets=self.vpc_subnets if self.use_existing_vpc else [],
                vpc_public_subnets=self.vpc_public_subnets if self.use_existing_vpc else [],
            ),
            alb=AlbConfig(self.use_existing_alb, self.listener_arn),
            rds=RdsConfig(
                use_existing_rds=self.use_existing_rds,
                rds_host=self.rds_host,
                rds_db_user_name=self.rds_db_user_name,
                rds_db_password=self.rds_db_password,
                rds_db_name=self.rds_db_name,
            ),
            ghost_hosting_url=strip_trailing_slashes(self.ghost_hosting_url),
            host_static_website=self.host_static_website,
            static_website_url=strip_trailing_slashes(self.static_website_url),
            unique_identifier=unique_identifier,
        )


class CollectorResult:
    """
    Outcome of a collector run: the action and, for deploy, the configuration to use.
    raw is the configuration mapping exactly as persisted; on the reuse path it is the
    file content as read, unknown keys included.
    """

    def __init__(self, action: str, config: DeploymentConfig = None, reused: bool = False, raw: dict = None):
        self.action = action
        self.config = config
        self.reused = reused
        if raw is None and config is not None:
            raw = config.to_dict()
        self.raw = raw

    def __repr__(self):
        return f"CollectorResult(action={self.action!r}, reused={self.reused}, config={self.config!r})"


class ConfigCollector:
    """
    Asks the questions that decide what infrastructure gets built,
    validates the answers and persists them through a ConfigStore.
    """

    def __init__(self, input_source, store, logger=None, clock=None):
        """
        :param input_source: Object with ask(question, default=None, secret=False) -> str.
        :param store: ConfigStore where config.json lives.
        :param logger: Optional logging function (defaults to terminal output).
        :param clock: Callable returning the current time in seconds (defaults to time.time).
        """
        self.input_source = input_source
        self.store = store
        self.logger = logger if logger else log
        self.clock = clock if clock else time.time

    def perform(self, argv=None) -> CollectorResult:
        """
        Main performer of the class.
        Raises UsageError, ValidationError or GuidanceExit; nothing is written unless
        every answer is valid.
        """
        args = parse_arguments(argv)
        return self.collect(
            args.action,
            access_key_id=args.aws_access_key_id,
            secret_access_key=args.aws_secret_access_key,
            region=args.aws_region,
        )

    def collect(self, action, access_key_id=None, secret_access_key=None, region=None):
        if action == ACTION_DESTROY:
            return CollectorResult(action)

        previous = self.store.load_previous_config()
        if previous is not None and self.use_previous_config():
            self._log(f"[INFO] Reusing configuration from {self.store.path}\n")
            return CollectorResult(
                action, DeploymentConfig.from_dict(previous), reused=True, raw=previous
            )

        builder = ConfigBuilder(access_key_id, secret_access_key, region)
        builder = self.get_aws_credentials(builder)
        builder = self.get_vpc_configuration(builder)
        builder = self.get_alb_requirements(builder)
        builder = self.get_blog_requirements(builder)
        builder = self.get_rds_requirements(builder)

        config = validate_config(builder.build())
        config = self.create_config(config)
        return CollectorResult(action, config)

    def use_previous_config(self) -> bool:
        answer = self._ask_yes_no(
            f'Previous installation "{self.store.path}" file found, Would you like to use the '
            "existing configuration options? [Else it will start from the scratch] (Y/n) : ",
            default=YES,
        )
        return answer == YES

    def get_aws_credentials(self, builder: ConfigBuilder) -> ConfigBuilder:
        if not builder.access_key_id:
            builder.access_key_id = self._ask_required("AWS access key id : ")
        if not builder.secret_access_key:
            builder.secret_access_key = self._ask_required("AWS secret access key : ")
        if not builder.region:
            builder.region = self._ask_required("AWS region : ")
        return builder

    def get_vpc_configuration(self, builder: ConfigBuilder) -> ConfigBuilder:
        builder.use_existing_vpc = self._ask_yes_no("Use existing VPC? (y/N) : ", default=NO) == YES
        if builder.use_existing_vpc:
            raw = self._ask_required(
                "Provide VPC Subnets to run ECS tasks "
                "[comma separated values, at least 2 subnets required] : ",
                message="Invalid VPC Subnets.",
            )
            builder.vpc_subnets = split_subnets(raw)
        return builder

    def get_alb_requirements(self, builder: ConfigBuilder) -> ConfigBuilder:
        # A new VPC always gets a new ALB, so there is nothing to ask.
        if not builder.use_existing_vpc:
            builder.use_existing_alb = False
            return builder

        builder.use_existing_alb = self._ask_yes_no("Do you have existing ALB? (y/N) : ", default=NO) == YES
        if builder.use_existing_alb:
            builder.listener_arn = self._ask_required(
                "Please provide listener ARN : ", message="Invalid listener ARN."
            )
        else:
            raw = self._ask_required(
                "Provide VPC Public Subnets to launch ALB "
                "[comma separated values, at least 2 subnets required] : ",
                message="Invalid VPC Public Subnets.",
            )
            builder.vpc_public_subnets = split_subnets(raw)
        return builder

    def get_blog_requirements(self, builder: ConfigBuilder) -> ConfigBuilder:
        builder.ghost_hosting_url = self._ask_required("Ghost hosting url : ")

        builder.host_static_website = (
            self._ask_yes_no("Do you want to host static website? (Y/n) : ", default=YES) == YES
        )
        if builder.host_static_website:
            builder.static_website_url = self._ask_required("Static website url : ")

        has_route53 = self._ask_yes_no(
            "Do you have Route53 configured for the domain in the same AWS account? "
            "[Else the SSL certification verification will fail] (Y/n) : ",
            default=YES,
        )
        if has_route53 == NO:
            raise GuidanceExit("Cannot proceed further!")
        return builder

    def get_rds_requirements(self, builder: ConfigBuilder) -> ConfigBuilder:
        builder.use_existing_rds = (
            self._ask_yes_no("Do you want to use existing RDS MySQL instance? (y/N) : ", default=NO) == YES
        )
        if builder.use_existing_rds:
            builder.rds_host = self._ask_required("MySQL host : ")
            builder.rds_db_user_name = self._ask_required("MySQL user name : ")
            builder.rds_db_password = self._ask_required("MySQL user password : ", secret=True)
            builder.rds_db_name = self._ask_required("MySQL database name : ")
        return builder

    def create_config(self, config: DeploymentConfig) -> DeploymentConfig:
        """Stamp the config with a timestamp identifier and write it to the store."""
        config.unique_identifier = str(int(self.clock()))
        self.store.save(config)
        self._log(f"[INFO] Configuration written to {self.store.path}\n")
        return config

    def _ask_required(self, question, message=None, secret=False):
        answer = self.input_source.ask(question, secret=secret)
        return validate_required(answer, message)

    def _ask_yes_no(self, question, default):
        answer = self.input_source.ask(question, default=default)
        return validate_yes_no(answer, default)

    def _log(self, msg):
        """Helper to send logs to self.logger."""
        if callable(self.logger):
            self.logger(msg)
        else:
            print(msg, end="")
