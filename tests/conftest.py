import pytest

from predictor.dataset import Disease, load_diseases
from predictor.engine import PredictionEngine


@pytest.fixture
def flu_covid():
    return [
        Disease.from_record("Flu", ["fever", "chills", "body ache", "cough", "fatigue"],
                            "A viral infection causing fever and body aches."),
        Disease.from_record("COVID-19", ["fever", "cough", "fatigue", "loss of taste", "loss of smell"],
                            "Respiratory illness caused by SARS-CoV-2 virus."),
    ]


@pytest.fixture(scope="session")
def all_diseases():
    return load_diseases()


@pytest.fixture(scope="session")
def engine(all_diseases):
    return PredictionEngine(all_diseases)
