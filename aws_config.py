# aws_config.py
import os

import boto3
from botocore.config import Config

# -----------------------------
# AWS region & boto3 config
# -----------------------------
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")

boto3_config = Config(
    region_name=AWS_REGION,
    retries={"max_attempts": 3, "mode": "standard"}
)


# -----------------------------
# AWS clients
# -----------------------------
def sns_client():
    return boto3.client("sns", region_name=AWS_REGION, config=boto3_config)


# -----------------------------
# SNS configuration
# -----------------------------
DEFAULT_SNS_TOPIC_NAME = os.getenv("POS_SNS_TOPIC_NAME", "pos-reorder-alerts")


def get_sns_topic_arn(topic_name=DEFAULT_SNS_TOPIC_NAME):
    """
    Return the ARN of the reorder alert topic.

    POS_SNS_TOPIC_ARN wins when set. Otherwise every page of list_topics is
    searched for the topic name and the topic is created if it is missing.
    """
    fixed_arn = os.getenv("POS_SNS_TOPIC_ARN")
    if fixed_arn:
        return fixed_arn

    sns = sns_client()
    next_token = None
    while True:
        if next_token:
            response = sns.list_topics(NextToken=next_token)
        else:
            response = sns.list_topics()

        for topic in response.get("Topics", []):
            arn = topic["TopicArn"]
            if arn.split(":")[-1] == topic_name:
                return arn

        next_token = response.get("NextToken")
        if not next_token:
            break

    # Topic does not exist → create it
    resp = sns.create_topic(Name=topic_name)
    return resp["TopicArn"]
