import boto3

from aws_config import AWS_REGION, boto3_config


class AWSBaseClient:
    """
    Base AWS client that builds a NEW boto3 session on every access
    so rotated or expired temporary credentials are picked up.
    """

    def __init__(self, service_name, region_name=AWS_REGION):
        self.service_name = service_name
        self.region_name = region_name

    @property
    def client(self):
        session = boto3.Session()
        return session.client(
            self.service_name,
            region_name=self.region_name,
            config=boto3_config,
        )
