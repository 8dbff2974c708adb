# io_save_load.py
# load/save helpers

import json, os, pathlib as _p

from .model import DisplayModel

def load_source(path: str) -> str:
    with open(path, encoding="utf-8") as f: return f.read()

def save_json(path: str, obj: dict):
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)

def save_display_model(path: str, model: DisplayModel):
    save_json(path, model.to_dict())
