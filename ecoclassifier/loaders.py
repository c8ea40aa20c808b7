"""
Load historical texts from JSON, CSV, plain text or PDF files.
"""

import io
import os
import sys
import json

import PyPDF2
import pandas as pd
from pydantic import ValidationError

from ecoclassifier.exceptions import InvalidInputError
from ecoclassifier.models import HistoricalText


def extract_text_from_pdf(file_bytes: bytes) -> tuple:
    """Extract text from PDF bytes"""
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(file_bytes))
        text = ' '.join([page.extract_text() or '' for page in reader.pages])
        return text, len(reader.pages)
    except Exception as e:
        raise InvalidInputError(f"Error reading PDF: {e}") from e


def record_to_text(record: dict) -> HistoricalText:
    if record.get('id') is None or str(record['id']).strip() == '':
        raise InvalidInputError(f"Record without id: {record}")
    data = {k: v for k, v in record.items() if v is not None}
    data['id'] = str(data['id'])
    data.setdefault('timestamp', 0.0)
    try:
        return HistoricalText(**data)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid record '{data['id']}': {e}") from e


def records_to_texts(records: list) -> list:
    """Convert records one at a time; a malformed record is reported and skipped."""
    texts = []
    for record in records:
        if not isinstance(record, dict):
            print(f"Skipping record: not an object: {record!r}", file=sys.stderr)
            continue
        try:
            texts.append(record_to_text(record))
        except InvalidInputError as e:
            print(f"Skipping record: {e.detail}", file=sys.stderr)
    return texts


def load_texts(path: str) -> list:
    ext = os.path.splitext(path)[1].lower()
    name = os.path.splitext(os.path.basename(path))[0]

    if ext == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        records = data if isinstance(data, list) else [data]
        return records_to_texts(records)

    if ext == '.csv':
        df = pd.read_csv(path)
        df = df.astype(object).where(df.notna(), None)
        return records_to_texts(df.to_dict('records'))

    if ext == '.pdf':
        with open(path, 'rb') as f:
            text, _ = extract_text_from_pdf(f.read())
        return [HistoricalText(id=name, content=text, timestamp=0.0, source=path)]

    with open(path, 'r', encoding='utf-8') as f:
        return [HistoricalText(id=name, content=f.read(), timestamp=0.0, source=path)]


def load_all(paths: list) -> list:
    texts = []
    for path in paths:
        texts.extend(load_texts(path))
    return texts
