"""Настройки подключения к Firestore."""

import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from dualschedule.core.config.settings import settings
from dualschedule.core.exceptions import StoreNotInitializedError
from dualschedule.core.logging.logger import logger


class FirestoreManager:
    """Менеджер подключения к Firestore."""

    def __init__(self):
        self._app: Optional[firebase_admin.App] = None
        self._client: Optional[AsyncClient] = None

    @property
    def client(self) -> AsyncClient:
        """Асинхронный клиент Firestore."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _get_or_init_app(self) -> firebase_admin.App:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        if settings.firebase_credentials_path:
            credential = credentials.Certificate(settings.firebase_credentials_path)
        else:
            credential = credentials.ApplicationDefault()

        options = {}
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id

        return firebase_admin.initialize_app(credential, options or None)

    def _create_client(self) -> AsyncClient:
        """Создание асинхронного клиента."""
        try:
            if settings.firestore_emulator_host:
                # Клиент google-cloud-firestore читает эмулятор из окружения
                os.environ["FIRESTORE_EMULATOR_HOST"] = settings.firestore_emulator_host

            logger.info("Initializing Firestore...")
            self._app = self._get_or_init_app()
            client = firestore_async.client(self._app)
            logger.info(
                "Firestore client created",
                project_id=settings.firebase_project_id,
                emulator=settings.firestore_emulator_host,
            )
            return client

        except Exception as e:
            logger.error(f"Error initializing Firestore: {e}")
            raise StoreNotInitializedError() from e

    def reset(self) -> None:
        """Сброс клиента (следующее обращение создаст новый)."""
        if self._client is not None:
            self._client = None
            logger.info("Firestore client reset")


# Глобальный экземпляр менеджера
firestore_manager = FirestoreManager()


def get_firestore() -> AsyncClient:
    """Получение клиента Firestore."""
    return firestore_manager.client
