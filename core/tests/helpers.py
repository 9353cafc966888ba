from core.config import PlatformConfig


def make_config(**overrides):
    """PlatformConfig with test credentials; keyword arguments replace fields."""
    values = dict(
        admin_user_id="1",
        frontend_url="http://localhost:3000",
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret="whsec_test",
        stripe_api_version="2024-06-20",
        currency="jpy",
        mux_token_id="token-id",
        mux_token_secret="token-secret",
        mux_base_url="https://api.mux.test",
        mux_timeout=5,
    )
    values.update(overrides)
    return PlatformConfig(**values)
