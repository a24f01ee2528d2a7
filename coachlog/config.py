"""
CoachLog – Standardkonfiguration
--------------------------------
Wird in create_app zuerst geladen. Lokale bzw. sensible Werte gehören in
instance/config.py (gleiche Schlüssel), das diese Defaults überschreibt.
"""

# ⚙️ Flask-Grundeinstellungen
SECRET_KEY = "dev"                  # Bitte in instance/config.py ändern!

# 🌐 Externer Daten-Service (liefert/speichert die Einträge)
ENTRIES_API_URL = "http://localhost:3000"
ENTRIES_API_TIMEOUT = 10            # Sekunden pro Request

# 📝 Logging
LOG_LEVEL = "INFO"
