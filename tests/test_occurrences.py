from omise.operations.base import Description, Endpoint
from omise.operations.occurrences import RetrieveOccurrence

OCCURRENCE_ID = "occu_57z9hj228pusa652nk1"


def test_retrieve_occurrence_describe():
    assert RetrieveOccurrence(occurrence_id=OCCURRENCE_ID).describe() == Description(
        Endpoint.API, "GET", "/occurrences/occu_57z9hj228pusa652nk1", "application/json"
    )


def test_retrieve_occurrence_payload_is_empty():
    assert RetrieveOccurrence(OCCURRENCE_ID).to_json() == "{}"