# config.py


class AwsCredentials:
    """
    AWS credentials and region used by every provisioning call.
    """

    def __init__(self, access_key_id: str, secret_access_key: str, region: str):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.region = region

    def to_dict(self):
        return {
            "accessKeyId": self.access_key_id,
            "secretAccessKey": self.secret_access_key,
            "region": self.region,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            access_key_id=data.get("accessKeyId", ""),
            secret_access_key=data.get("secretAccessKey", ""),
            region=data.get("region", ""),
        )

    def __repr__(self):
        return (
            f"AwsCredentials(access_key_id={self.access_key_id!r}, "
            f"secret_access_key=<hidden>, region={self.region!r})"
        )


class VpcConfig:
    """
    Network topology. Subnet lists only matter when reusing an existing VPC;
    public subnets are only needed when a new ALB will be created in it.
    """

    def __init__(
        self,
        use_existing_vpc: bool = False,
        vpc_subnets: list = None,
        vpc_public_subnets: list = None,
    ):
        self.use_existing_vpc = use_existing_vpc
        self.vpc_subnets = vpc_subnets or []
        self.vpc_public_subnets = vpc_public_subnets or []

    def to_dict(self, use_existing_alb: bool = False):
        data = {"useExistingVpc": self.use_existing_vpc}
        if self.use_existing_vpc:
            data["vpcSubnets"] = list(self.vpc_subnets)
            if not use_existing_alb:
                data["vpcPublicSubnets"] = list(self.vpc_public_subnets)
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            use_existing_vpc=bool(data.get("useExistingVpc", False)),
            vpc_subnets=list(data.get("vpcSubnets", [])),
            vpc_public_subnets=list(data.get("vpcPublicSubnets", [])),
        )

    def __repr__(self):
        return (
            f"VpcConfig(use_existing_vpc={self.use_existing_vpc}, "
            f"vpc_subnets={self.vpc_subnets!r}, vpc_public_subnets={self.vpc_public_subnets!r})"
        )


class AlbConfig:
    """Load balancer topology; listener_arn is set only when reusing an ALB."""

    def __init__(self, use_existing_alb: bool = False, listener_arn: str = None):
        self.use_existing_alb = use_existing_alb
        self.listener_arn = listener_arn if use_existing_alb else None

    def to_dict(self):
        data = {"useExistingAlb": self.use_existing_alb}
        if self.use_existing_alb:
            data["listenerArn"] = self.listener_arn
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            use_existing_alb=bool(data.get("useExistingAlb", False)),
            listener_arn=data.get("listenerArn"),
        )

    def __repr__(self):
        return f"AlbConfig(use_existing_alb={self.use_existing_alb}, listener_arn={self.listener_arn!r})"


class RdsConfig:
    """Database topology; connection details exist only for an existing instance."""

    def __init__(
        self,
        use_existing_rds: bool = False,
        rds_host: str = None,
        rds_db_user_name: str = None,
        rds_db_password: str = None,
        rds_db_name: str = None,
    ):
        self.use_existing_rds = use_existing_rds
        self.rds_host = rds_host
        self.rds_db_user_name = rds_db_user_name
        self.rds_db_password = rds_db_password
        self.rds_db_name = rds_db_name

    def to_dict(self):
        data = {"useExistingRds": self.use_existing_rds}
        if self.use_existing_rds:
            data.update(
                {
                    "rdsHost": self.rds_host,
                    "rdsDbUserName": self.rds_db_user_name,
                    "rdsDbName": self.rds_db_name,
                    "rdsDbPassword": self.rds_db_password,
                }
            )
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            use_existing_rds=bool(data.get("useExistingRds", False)),
            rds_host=data.get("rdsHost"),
            rds_db_user_name=data.get("rdsDbUserName"),
            rds_db_password=data.get("rdsDbPassword"),
            rds_db_name=data.get("rdsDbName"),
        )

    def __repr__(self):
        return (
            f"RdsConfig(use_existing_rds={self.use_existing_rds}, rds_host={self.rds_host!r}, "
            f"rds_db_user_name={self.rds_db_user_name!r}, rds_db_password=<hidden>, "
            f"rds_db_name={self.rds_db_name!r})"
        )


class DeploymentConfig:
    """
    Holds all configuration data for a deployment.
    Serialized to config.json in the camelCase layout the cdktf stacks read.
    """

    def __init__(
        self,
        aws: AwsCredentials,
        vpc: VpcConfig = None,
        alb: AlbConfig = None,
        rds: RdsConfig = None,
        ghost_hosting_url: str = "",
        host_static_website: bool = False,
        static_website_url: str = "",
        unique_identifier: str = None,
    ):
        self.aws = aws
        self.vpc = vpc if vpc else VpcConfig()
        self.alb = alb if alb else AlbConfig()
        self.rds = rds if rds else RdsConfig()
        self.ghost_hosting_url = ghost_hosting_url
        self.host_static_website = host_static_website
        self.static_website_url = static_website_url if host_static_website else ""
        self.unique_identifier = unique_identifier

    def to_dict(self):
        data = {
            "aws": self.aws.to_dict(),
            "ghostHostingUrl": self.ghost_hosting_url,
            "hostStaticWebsite": self.host_static_website,
            "staticWebsiteUrl": self.static_website_url,
            "vpc": self.vpc.to_dict(use_existing_alb=self.alb.use_existing_alb),
            "alb": self.alb.to_dict(),
            "rds": self.rds.to_dict(),
        }
        if self.unique_identifier is not None:
            data["uniqueIdentifier"] = self.unique_identifier
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            aws=AwsCredentials.from_dict(data.get("aws", {})),
            vpc=VpcConfig.from_dict(data.get("vpc", {})),
            alb=AlbConfig.from_dict(data.get("alb", {})),
            rds=RdsConfig.from_dict(data.get("rds", {})),
            ghost_hosting_url=data.get("ghostHostingUrl", ""),
            host_static_website=bool(data.get("hostStaticWebsite", False)),
            static_website_url=data.get("staticWebsiteUrl", ""),
            unique_identifier=data.get("uniqueIdentifier"),
        )

    def __repr__(self):
        return (
            f"DeploymentConfig("
            f"aws={self.aws!r}, vpc={self.vpc!r}, alb={self.alb!r}, rds={self.rds!r}, "
            f"ghost_hosting_url={self.ghost_hosting_url!r}, "
            f"host_static_website={self.host_static_website}, "
            f"static_website_url={self.static_website_url!r}, "
            f"unique_identifier={self.unique_identifier!r}"
            f")"
        )
