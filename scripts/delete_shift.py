#!/usr/bin/env python3
"""
Диагностический скрипт: удаление одной смены по id.

Использование: python scripts/delete_shift.py <shift_id>
"""

import asyncio
import sys

from dualschedule.core.config.settings import settings
from dualschedule.core.logging.logger import setup_logging
from dualschedule.shared.services.firestore_service import FirestoreService


async def delete_shift(shift_id: str):
    store = FirestoreService()
    print(f"Attempting to delete shift with ID: {shift_id} at path: {store.shift_document_path(shift_id)}")
    try:
        await store.delete_shift(shift_id)
        print(f"✅ Shift with ID: {shift_id} deleted successfully.")
    except Exception as e:
        print(f"❌ Error deleting shift with ID: {shift_id}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/delete_shift.py <shift_id>")
        sys.exit(2)

    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    asyncio.run(delete_shift(sys.argv[1]))
