# constants.py

CONFIG_FILE = "config.json"

ACTION_DEPLOY = "deploy"
ACTION_DESTROY = "destroy"
ALLOWED_ACTIONS = [ACTION_DEPLOY, ACTION_DESTROY]

YES = "y"
NO = "n"

# Keys a persisted config.json must carry before it can be reused.
REQUIRED_CONFIG_KEYS = [
    "aws",
    "ghostHostingUrl",
    "hostStaticWebsite",
    "staticWebsiteUrl",
    "vpc",
    "alb",
    "rds",
]

MIN_SUBNETS = 2
HTTPS_SCHEME = "https"

CDKTF_DIFF = "cdktf diff"
CDKTF_DEPLOY = "cdktf deploy --auto-approve"
CDKTF_DESTROY = "cdktf destroy --auto-approve"
