"""
Подключение к Firestore.
"""

from .connection import FirestoreManager, firestore_manager, get_firestore

__all__ = ["FirestoreManager", "firestore_manager", "get_firestore"]
