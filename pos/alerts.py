import logging

from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from aws_config import get_sns_topic_arn
from aws_lib.sns_client import SNSClient

logger = logging.getLogger(__name__)

sns = SNSClient()


def reorder_message(item):
    return f"Reorder alert: {item.name} is down to {item.amount:g} {item.unit}"


def notify_reorder(item):
    """
    Publish a reorder alert for an inventory item.

    Returns True when the message went out. A failed publish is logged and
    never fails the inventory write that triggered it.
    """
    if not settings.POS_REORDER_ALERTS:
        return False

    try:
        sns.publish(get_sns_topic_arn(), reorder_message(item), subject="Reorder Alert")
    except (BotoCoreError, ClientError):
        logger.exception("Could not publish reorder alert for inventory item %s", item.pk)
        return False

    logger.info("Reorder alert sent for inventory item %s (%s)", item.pk, item.name)
    return True
