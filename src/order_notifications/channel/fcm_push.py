"""Firebase Cloud Messaging adapter (HTTP v1 API)."""

import httpx
import structlog

from order_notifications.channel.push_credentials import AccessTokenProvider, DeviceTokenResolver
from order_notifications.channel.push_port import PushPort
from order_notifications.errors import PushError

logger = structlog.get_logger(__name__)

FCM_SEND_URL = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"
FLUTTER_CLICK_ACTION = "FLUTTER_NOTIFICATION_CLICK"


def build_push_payload(device_token: str, title: str, body: str, order_id: str, screen: str) -> dict:
    """Build an FCM v1 message with APNs and Android blocks and a deep link."""
    return {
        "message": {
            "token": device_token,
            "notification": {"title": title, "body": body},
            "data": {
                "order_id": str(order_id),
                "screen": screen,
            },
            "apns": {
                "payload": {
                    "aps": {"sound": "default", "badge": 1},
                },
            },
            "android": {
                "notification": {
                    "sound": "default",
                    "click_action": FLUTTER_CLICK_ACTION,
                },
            },
        }
    }


class FcmPushAdapter(PushPort):
    def __init__(
        self,
        client: httpx.Client,
        token_provider: AccessTokenProvider,
        device_tokens: DeviceTokenResolver,
        screen_route: str = "/orders",
        send_url: str = FCM_SEND_URL,
    ):
        self._client = client
        self._token_provider = token_provider
        self._device_tokens = device_tokens
        self._screen_route = screen_route
        self._send_url = send_url

    def send_push(
        self,
        user_id: str,
        title: str,
        body: str,
        order_id: str,
        product_name: str,
    ) -> bool:
        try:
            self._deliver(user_id, title, body, order_id)
        except Exception as e:
            logger.error(
                "Push notification failed",
                user_id=user_id,
                order_id=str(order_id),
                title=title,
                error=str(e),
            )
            return False

        logger.info(
            "Push notification sent",
            user_id=user_id,
            order_id=str(order_id),
            product_name=product_name,
            title=title,
        )
        return True

    def _deliver(self, user_id: str, title: str, body: str, order_id: str) -> None:
        access = self._token_provider.access_token()

        device_token = self._device_tokens.token_for(user_id)
        if not device_token:
            raise PushError(f"No device token registered for user {user_id}")

        payload = build_push_payload(device_token, title, body, order_id, self._screen_route)
        response = self._client.post(
            self._send_url.format(project_id=access.project_id),
            json=payload,
            headers={"Authorization": f"Bearer {access.token}"},
        )
        if not response.is_success:
            raise PushError(f"FCM request failed ({response.status_code}): {response.text}")
