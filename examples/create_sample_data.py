"""Crée des fichiers de démonstration pour Tournée."""

import json
from pathlib import Path

import pandas as pd

DATA_DIR = Path(__file__).parent / "data"
DATA_DIR.mkdir(exist_ok=True)

addresses = [
    "12 Elm Street, Springfield, IL 62701",
    "44 Main Avenue, Shelbyville, IL 62565",
    "742 Evergreen Terrace, Springfield, IL 62704",
    "1600 Martin Luther King Boulevard, Austin, TX 78702",
]

drivers = pd.DataFrame({
    "name": ["Ann", "Eve Li", "Bob Stone", "Jean Dupont", "Everett Quinn"],
    "zone": ["Nord", "Sud", "Est", "Ouest", "Centre"],
})

(DATA_DIR / "addresses.txt").write_text("\n".join(addresses) + "\n", encoding="utf-8")
drivers.to_excel(DATA_DIR / "drivers.xlsx", index=False, engine="openpyxl")

config = {
    "address_file": "addresses.txt",
    "driver_file": "drivers.xlsx",
    "driver_column": "name",
}
(DATA_DIR / "config.json").write_text(json.dumps(config, indent=2), encoding="utf-8")
print(f"Fichiers créés dans {DATA_DIR}")
