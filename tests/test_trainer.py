"""Tests for the model trainer script."""
import os
import pytest

import ml_trainer
from ecoclassifier.exceptions import InvalidInputError
from ecoclassifier.keywords import TRAINING_DOCUMENTS
from ecoclassifier.scoring import ModelManager


class TestLoadCorpus:
    def test_builtin_corpus(self):
        assert ml_trainer.load_corpus() == TRAINING_DOCUMENTS

    def test_csv_rows_are_added(self, tmp_path):
        path = tmp_path / 'extra.csv'
        path.write_text("text,label\nreed beds along the marsh,wetland\n,forest\n", encoding='utf-8')
        documents = ml_trainer.load_corpus(str(path))
        assert len(documents) == len(TRAINING_DOCUMENTS) + 1
        assert documents[-1] == ('reed beds along the marsh', 'wetland')

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / 'bad.csv'
        path.write_text("sentence,label\nsome text,forest\n", encoding='utf-8')
        with pytest.raises(InvalidInputError):
            ml_trainer.load_corpus(str(path))


class TestCrossValidate:
    def test_skipped_for_tiny_corpus(self):
        assert ml_trainer.cross_validate(TRAINING_DOCUMENTS) is None

    def test_runs_with_enough_samples(self):
        documents = TRAINING_DOCUMENTS * 3
        mean, std = ml_trainer.cross_validate(documents)
        assert 0 <= mean <= 1


def test_main_saves_loadable_model(tmp_path):
    model_path, vec_path = ml_trainer.main(model_dir=str(tmp_path))
    assert os.path.exists(model_path) and os.path.exists(vec_path)
    assert ModelManager().load(str(tmp_path))
