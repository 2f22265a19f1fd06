from ghost_hosting.config import (
    AlbConfig,
    AwsCredentials,
    DeploymentConfig,
    RdsConfig,
    VpcConfig,
)


def test_optional_groups_omitted_when_disabled():
    config = DeploymentConfig(
        aws=AwsCredentials("AKIA", "secret", "us-east-1"),
        ghost_hosting_url="https://blog.example.com",
        host_static_website=False,
        static_website_url="https://ignored.example.com",
        unique_identifier="1700000000",
    )
    assert config.to_dict() == {
        "aws": {"accessKeyId": "AKIA", "secretAccessKey": "secret", "region": "us-east-1"},
        "ghostHostingUrl": "https://blog.example.com",
        "hostStaticWebsite": False,
        "staticWebsiteUrl": "",
        "vpc": {"useExistingVpc": False},
        "alb": {"useExistingAlb": False},
        "rds": {"useExistingRds": False},
        "uniqueIdentifier": "1700000000",
    }


def test_existing_infrastructure_fields_present():
    config = DeploymentConfig(
        aws=AwsCredentials("AKIA", "secret", "us-east-1"),
        vpc=VpcConfig(True, ["s-1", "s-2"], ["p-1", "p-2"]),
        alb=AlbConfig(True, "arn:listener"),
        rds=RdsConfig(True, "db.host", "admin", "pw", "ghost"),
        ghost_hosting_url="https://blog.example.com",
    )
    data = config.to_dict()
    # Existing ALB: no public subnets needed.
    assert data["vpc"] == {"useExistingVpc": True, "vpcSubnets": ["s-1", "s-2"]}
    assert data["alb"] == {"useExistingAlb": True, "listenerArn": "arn:listener"}
    assert data["rds"] == {
        "useExistingRds": True,
        "rdsHost": "db.host",
        "rdsDbUserName": "admin",
        "rdsDbName": "ghost",
        "rdsDbPassword": "pw",
    }
    assert "uniqueIdentifier" not in data


def test_public_subnets_kept_for_new_alb():
    vpc = VpcConfig(True, ["s-1", "s-2"], ["p-1", "p-2"])
    assert vpc.to_dict(use_existing_alb=False)["vpcPublicSubnets"] == ["p-1", "p-2"]


def test_listener_arn_dropped_without_existing_alb():
    assert AlbConfig(False, "arn:listener").listener_arn is None


def test_from_dict_reads_what_to_dict_writes(saved_config):
    assert DeploymentConfig.from_dict(saved_config).to_dict() == saved_config


def test_repr_hides_secrets():
    config = DeploymentConfig(
        aws=AwsCredentials("AKIA", "top-secret", "us-east-1"),
        rds=RdsConfig(True, "db.host", "admin", "db-password", "ghost"),
    )
    text = repr(config)
    assert "top-secret" not in text
    assert "db-password" not in text
    assert "<hidden>" in text


def test_config_groups_are_hashable():
    groups = {AwsCredentials("AKIA", "secret", "us-east-1"), VpcConfig(), AlbConfig(), RdsConfig()}
    assert len(groups) == 4
