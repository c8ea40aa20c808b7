"""
╔══════════════════════════════════════════════════════════════════════════════╗
║           ML TRAINER - Historical Ecosystem Classification                   ║
║                                                                              ║
║  Model: Multinomial Naive Bayes                                              ║
║  Features: Porter-stemmed term counts (English stop words removed)           ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

import os
import argparse
import pandas as pd

from sklearn.model_selection import cross_val_score
from sklearn.naive_bayes import MultinomialNB
from sklearn.pipeline import Pipeline
from sklearn.feature_extraction.text import CountVectorizer

from ecoclassifier import TRAINING_DOCUMENTS, ModelManager, InvalidInputError
from ecoclassifier.text import stemmed_terms

# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
MODEL_DIR = os.environ.get('MODEL_DIR', os.path.join(BASE_DIR, 'ML_Models'))

# ═══════════════════════════════════════════════════════════════════════════════
# DATA
# ═══════════════════════════════════════════════════════════════════════════════

def load_corpus(csv_path=None):
    """
    Load (text, label) pairs.

    Without a CSV the built-in labelled sentences are used. A CSV must
    have `text` and `label` columns; its rows are added to the built-in set.
    """
    documents = list(TRAINING_DOCUMENTS)
    if csv_path is None:
        return documents

    df = pd.read_csv(csv_path)
    missing = {'text', 'label'} - set(df.columns)
    if missing:
        raise InvalidInputError(f"Training CSV missing columns: {', '.join(sorted(missing))}")

    df = df.dropna(subset=['text', 'label'])
    documents.extend(zip(df['text'].astype(str), df['label'].astype(str)))
    return documents


# ═══════════════════════════════════════════════════════════════════════════════
# EVALUATION
# ═══════════════════════════════════════════════════════════════════════════════

def cross_validate(documents, folds=3):
    """Cross-validated accuracy, or None when a class has fewer samples than folds."""
    df = pd.DataFrame(documents, columns=['text', 'label'])
    if df['label'].value_counts().min() < folds:
        return None

    pipeline = Pipeline([
        ('vectorizer', CountVectorizer(analyzer=stemmed_terms)),
        ('model', MultinomialNB()),
    ])
    scores = cross_val_score(pipeline, df['text'], df['label'], cv=folds, scoring='accuracy')
    return scores.mean(), scores.std()


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN
# ═══════════════════════════════════════════════════════════════════════════════

def main(csv_path=None, model_dir=MODEL_DIR):
    print("="*70)
    print("ML TRAINER - Historical Ecosystem Classification")
    print("="*70)

    documents = load_corpus(csv_path)
    print(f"📂 Loaded {len(documents)} labelled sentences")

    print("\n📊 Label Distribution:")
    labels = pd.Series([label for _, label in documents])
    for label, count in labels.value_counts().items():
        print(f"   {label}: {count} ({count / len(documents) * 100:.1f}%)")

    cv = cross_validate(documents)
    if cv is None:
        print("\n⚠️ Too few samples per class for cross-validation, skipping.")
    else:
        print(f"\n   CV Accuracy: {cv[0]:.3f} (+/- {cv[1]:.3f})")

    manager = ModelManager().train(documents)
    model_path, vec_path = manager.save(model_dir)

    print("\n" + "="*70)
    print("✅ TRAINING COMPLETE!")
    print("="*70)
    return model_path, vec_path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Train the ecosystem Naive Bayes model")
    parser.add_argument("--csv", type=str, default=None, help="Extra labelled data (text,label columns)")
    parser.add_argument("--model-dir", type=str, default=MODEL_DIR, help="Output directory for the model")
    args = parser.parse_args()

    main(args.csv, args.model_dir)
