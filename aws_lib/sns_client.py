from .base_client import AWSBaseClient


class SNSClient(AWSBaseClient):
    def __init__(self):
        super().__init__("sns")

    def publish(self, topic_arn, message, subject=None):
        params = {"TopicArn": topic_arn, "Message": message}
        if subject:
            params["Subject"] = subject
        return self.client.publish(**params)
