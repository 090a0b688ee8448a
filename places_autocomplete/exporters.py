# places_autocomplete/exporters.py
import os
import pandas as pd

from .models import PredictionCollection

COLUMNS = ["description", "place_id", "types"]

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def predictions_dataframe(predictions: PredictionCollection) -> pd.DataFrame:
    rows = [
        {"description": p.description, "place_id": p.place_id, "types": ",".join(p.types)}
        for p in predictions
    ]
    return pd.DataFrame(rows, columns=COLUMNS)

def export_predictions_csv(predictions: PredictionCollection, out_path: str) -> None:
    df = predictions_dataframe(predictions)
    df.to_csv(out_path, index=False)
