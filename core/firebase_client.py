# core/firebase_client.py
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from .config import settings

logger = logging.getLogger(__name__)

_SERVICE_ACCOUNT_FIELDS = {
    "type": "FB_ACCOUNT_TYPE",
    "project_id": "FB_PROJECT_ID",
    "private_key_id": "FB_PRIVATE_KEY_ID",
    "client_email": "FB_CLIENT_EMAIL",
    "client_id": "FB_CLIENT_ID",
    "auth_uri": "FB_AUTH_URI",
    "token_uri": "FB_TOKEN_URI",
    "auth_provider_x509_cert_url": "FB_AUTH_CERT_URL",
    "client_x509_cert_url": "FB_CERT_URL",
}

def service_account_info() -> dict:
    info = {field: getattr(settings, env_name) for field, env_name in _SERVICE_ACCOUNT_FIELDS.items()}
    info["type"] = info["type"] or "service_account"
    # .env files carry the key with escaped newlines
    info["private_key"] = (settings.FB_PRIVATE_KEY or "").replace("\\n", "\n")
    info["universe_domain"] = "googleapis.com"
    return info

def firebase_configured() -> bool:
    return bool(settings.FB_PROJECT_ID and settings.FB_PRIVATE_KEY and settings.FB_CLIENT_EMAIL)

def init_firebase():
    if not firebase_admin._apps:  # avoid double init in reload
        firebase_admin.initialize_app(credentials.Certificate(service_account_info()))
        logger.info(f"Firebase initialised for project {settings.FB_PROJECT_ID}")

def get_db():
    init_firebase()
    return firestore.client()

def kv_collection(name: str | None = None):
    """Collection holding one document per storage key."""
    return get_db().collection(name or settings.FIRESTORE_KV_COLLECTION)

def ping_firestore() -> bool:
    try:
        kv_collection().document("_health").get()
        return True
    except Exception as e:
        logger.warning(f"[Firestore] health ping failed: {e}")
        return False
