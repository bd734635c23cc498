"""Translation catalogs for the files app."""

TRANSLATIONS: dict[str, dict[str, dict[str, str]]] = {
    "files": {
        "de": {
            "Files": "Dateien",
            "Accept": "Annehmen",
            "Reject": "Ablehnen",
            "Incoming ownership transfer from {user}": "Eingehende Besitzübertragung von {user}",
            "Do you want to accept {path}?\n\nNote: The transfer process after accepting may take up to 1 hour.": (
                "Möchtest du {path} annehmen?\n\n"
                "Hinweis: Der Übertragungsprozess kann nach der Annahme bis zu 1 Stunde dauern."
            ),
            "Ownership transfer failed": "Besitzübertragung fehlgeschlagen",
            "Your ownership transfer of {path} to {user} failed.": (
                "Die Besitzübertragung von {path} an {user} ist fehlgeschlagen."
            ),
            "The ownership transfer of {path} from {user} failed.": (
                "Die Besitzübertragung von {path} von {user} ist fehlgeschlagen."
            ),
            "Ownership transfer done": "Besitzübertragung abgeschlossen",
            "Your ownership transfer of {path} to {user} has completed.": (
                "Deine Besitzübertragung von {path} an {user} wurde abgeschlossen."
            ),
            "The ownership transfer of {path} from {user} has completed.": (
                "Die Besitzübertragung von {path} von {user} wurde abgeschlossen."
            ),
        },
    },
}
