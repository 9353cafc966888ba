import hashlib
import hmac
import json
import time

WEBHOOK_SECRET = "whsec_test_secret"


def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp=None) -> str:
    """Build a Stripe-Signature header the way Stripe signs webhook deliveries."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def checkout_completed_event(course_id="c1", user_id="u1", session_id="cs_test_1", event_id="evt_1"):
    metadata = {}
    if course_id is not None:
        metadata["courseId"] = course_id
    if user_id is not None:
        metadata["userId"] = user_id
    return json.dumps(
        {
            "id": event_id,
            "object": "event",
            "type": "checkout.session.completed",
            "data": {
                "object": {
                    "id": session_id,
                    "object": "checkout.session",
                    "payment_status": "paid",
                    "metadata": metadata,
                }
            },
        }
    )
