"""
dualschedule: синхронизация расписания учителя и врача с Firestore.
"""

__version__ = "0.1.0"
