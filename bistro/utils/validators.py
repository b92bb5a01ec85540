import re

# Contrôle de forme uniquement: l'email d'identité est conservé tel qu'envoyé
# (casse, domaine) car il est comparé à l'identique aux paramètres ?email=.
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

def validate_identity_email(v: str) -> str:
    if not isinstance(v, str) or not _EMAIL_RE.match(v):
        raise ValueError("L'email doit être de la forme nom@domaine.tld")
    return v
