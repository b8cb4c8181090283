"""
Инфраструктурный слой dualschedule: настройки, логирование, Firestore, состояние.
"""
