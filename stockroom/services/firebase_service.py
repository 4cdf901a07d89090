import firebase_admin
from firebase_admin import credentials, firestore

from stockroom.core.config import Settings

FIREBASE_APP_NAME = "stockroom"


def init_firebase_app(settings: Settings) -> firebase_admin.App:
    """
    Initialise the Firebase Admin SDK app used by this process.

    A service-account key file is used when configured; otherwise the SDK
    falls back to application default credentials.
    """
    if settings.firebase_service_account_key_path:
        cred = credentials.Certificate(settings.firebase_service_account_key_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    return firebase_admin.initialize_app(cred, options, name=FIREBASE_APP_NAME)


def get_firestore_client(app: firebase_admin.App):
    return firestore.client(app=app)


def close_firebase_app(app: firebase_admin.App) -> None:
    firebase_admin.delete_app(app)
