# orchestrator.py

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from tqdm import tqdm

from .cdktf_cli import CdktfService
from .config import AwsCredentials
from .console import log
from .constants import (
    ACTION_DEPLOY,
    ACTION_DESTROY,
    CDKTF_DEPLOY,
    CDKTF_DESTROY,
    CDKTF_DIFF,
    NO,
    YES,
)
from .validation import ValidationError, validate_yes_no


def sts_client_for(aws: AwsCredentials):
    return boto3.client(
        "sts",
        aws_access_key_id=aws.access_key_id,
        aws_secret_access_key=aws.secret_access_key,
        region_name=aws.region,
    )


def check_credentials(aws: AwsCredentials, client_factory=None):
    """
    Checks the supplied keys against STS.
    Returns (True, account_id_str) if valid, else (False, error_message).
    """
    factory = client_factory if client_factory else sts_client_for
    try:
        identity = factory(aws).get_caller_identity()
    except (BotoCoreError, ClientError) as ex:
        msg = (
            f"[WARN] AWS credentials not accepted:\n{ex}\n"
            "Check the access key id, secret access key and region in the configuration.\n"
        )
        return (False, msg)
    return (True, identity["Account"])


class DeploymentOrchestrator:
    """
    Hands the persisted configuration over to cdktf, step by step.
    cdktf reads config.json itself; this class only decides which command to run.
    """

    def __init__(self, store, input_source, cdktf=None, logger=None, sts_client_factory=None):
        """
        :param store: ConfigStore holding the configuration written by the collector.
        :param input_source: Object with ask(question, default=None, secret=False) -> str.
        :param cdktf: CdktfService instance. If None, creates a new one.
        :param logger: Optional logging function (defaults to terminal output).
        :param sts_client_factory: Callable building an STS client from AwsCredentials.
        """
        self.store = store
        self.input_source = input_source
        self.logger = logger if logger else log
        self.cdktf = cdktf if cdktf else CdktfService(logger=self.logger)
        self.sts_client_factory = sts_client_factory

        self.steps = [
            "Read configuration",
            "Check AWS credentials",
            "Review planned changes",
            "Approve changes",
            "Apply changes",
        ]

    def run(self, action: str) -> bool:
        if action == ACTION_DEPLOY:
            return self.deploy()
        if action == ACTION_DESTROY:
            return self.destroy()
        raise ValueError(f"Unknown action: {action}")

    def deploy(self) -> bool:
        """
        Diff, ask for approval, then apply. Returns False if the user declines.
        Raises ValidationError for rejected credentials and CommandError for failed cdktf runs.
        """
        pbar = tqdm(total=len(self.steps), desc="Deployment", unit="step")
        try:
            # Step 1 - Read configuration
            self._log_step_start(0)
            config = self.store.read_config()
            self._log(f"[INFO] Deploying {config.ghost_hosting_url} in {config.aws.region}\n")
            pbar.update(1)

            # Step 2 - Check credentials
            self._log_step_start(1)
            creds_ok, acct = check_credentials(config.aws, self.sts_client_factory)
            if not creds_ok:
                self._log(acct)
                raise ValidationError("Cannot proceed without valid AWS credentials.")
            self._log(f"[INFO] AWS account: {acct}\n")
            pbar.update(1)

            # Step 3 - Diff
            self._log_step_start(2)
            self.cdktf.run_cmd(CDKTF_DIFF, stream=True)
            self._log("[INFO] Please review the diff output above for ghost-hosting.\n")
            pbar.update(1)

            # Step 4 - Approval
            self._log_step_start(3)
            answer = self.input_source.ask(
                "Do you want to approve? (Applies the changes outlined in the plan) (y/N) : ",
                default=NO,
            )
            if validate_yes_no(answer, NO) != YES:
                self._log("[INFO] Declined!\n")
                return False
            pbar.update(1)

            # Step 5 - Apply
            self._log_step_start(4)
            self.cdktf.run_cmd(CDKTF_DEPLOY, stream=True)
            pbar.update(1)
        finally:
            pbar.close()

        self._log("\n[INFO] Deployment complete!\n")
        return True

    def destroy(self) -> bool:
        """Tear down whatever the cdktf state describes. No questions asked, nothing written."""
        self._log("[INFO] Destroying ghost-hosting resources.\n")
        self.cdktf.run_cmd(CDKTF_DESTROY, stream=True)
        self._log("[INFO] Destroy complete!\n")
        return True

    def _log_step_start(self, step_index):
        """
        Helper for printing a step banner.
        """
        self._log(f"\n=== Step {step_index+1}/{len(self.steps)}: {self.steps[step_index]} ===\n")

    def _log(self, msg):
        """Helper to send logs to self.logger."""
        if callable(self.logger):
            self.logger(msg)
        else:
            print(msg, end="")
