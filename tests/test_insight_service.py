import json
from datetime import datetime, timedelta, timezone

import pytest

from career_ai.core.exceptions import (
    EmptyCompletion, InvalidAIResponse, ProfileIncomplete, Unauthenticated, UserNotFound
)
from career_ai.models.industry_insight import IndustryInsight
from career_ai.models.user import User
from career_ai.services.identity import StaticIdentityResolver
from career_ai.services.insight_service import InsightService


def insight_payload(**overrides):
    payload = {
        "salaryRanges": [
            {"role": "Backend Engineer", "min": 90000, "max": 160000, "median": 125000, "location": "US"},
            {"role": "Data Engineer", "min": 95000, "max": 170000, "median": 130000, "location": "US"},
        ],
        "growthRate": 12.5,
        "demandLevel": "High",
        "topSkills": ["Go", "Kubernetes", "SQL"],
        "marketOutlook": "Positive",
        "keyTrends": ["AI tooling", "Platform engineering"],
        "recommendedSkills": ["Rust", "Terraform"],
    }
    payload.update(overrides)
    return json.dumps(payload)


def test_first_request_creates_insight(db_session, user, identity, completion_client):
    completion_client.queue(insight_payload())
    before = datetime.now(timezone.utc)

    insight = InsightService(db_session, identity, completion_client).get_insights()

    assert insight.industry == "Software"
    assert insight.demand_level == "High"
    assert insight.market_outlook == "Positive"
    assert insight.salary_ranges[0]["role"] == "Backend Engineer"
    assert insight.recommended_skills == ["Rust", "Terraform"]
    next_update = insight.next_update
    if next_update.tzinfo is None:
        next_update = next_update.replace(tzinfo=timezone.utc)
    assert before + timedelta(days=7) <= next_update <= datetime.now(timezone.utc) + timedelta(days=7)

    call = completion_client.calls[0]
    assert call["temperature"] == 0.2
    assert "strict JSON API" in call["system"]
    assert "Software industry" in call["user"]
    assert '"demandLevel": "High" | "Medium" | "Low"' in call["user"]


def test_existing_insight_is_returned_without_regeneration(db_session, user, identity, completion_client):
    """Stale rows are still served as-is; expiry is not enforced."""
    stale = IndustryInsight(
        industry="Software",
        salary_ranges=[],
        growth_rate=3.0,
        demand_level="Low",
        top_skills=["COBOL"],
        market_outlook="Neutral",
        key_trends=[],
        recommended_skills=[],
        next_update=datetime.now(timezone.utc) - timedelta(days=30),
    )
    db_session.add(stale)
    db_session.commit()

    service = InsightService(db_session, identity, completion_client)
    first = service.get_insights()
    second = service.get_insights()

    assert first.id == second.id == stale.id
    assert second.top_skills == ["COBOL"]
    assert completion_client.calls == []


def test_second_call_reuses_generated_row(db_session, user, identity, completion_client):
    completion_client.queue(insight_payload())
    service = InsightService(db_session, identity, completion_client)

    first = service.get_insights()
    second = service.get_insights()

    assert first.id == second.id
    assert len(completion_client.calls) == 1
    assert db_session.query(IndustryInsight).count() == 1


def test_concurrent_insert_returns_winning_row(db_session, user, identity, completion_client, monkeypatch):
    """A unique-industry clash on insert falls back to the row that won."""
    winner = IndustryInsight(
        industry="Software",
        salary_ranges=[],
        growth_rate=7.0,
        demand_level="Medium",
        top_skills=["Go"],
        market_outlook="Positive",
        key_trends=[],
        recommended_skills=[],
        next_update=datetime.now(timezone.utc) + timedelta(days=7),
    )
    db_session.add(winner)
    db_session.commit()
    completion_client.queue(insight_payload())
    service = InsightService(db_session, identity, completion_client)

    real_find = service._find
    lookups = []

    def find_missing_once(industry):
        lookups.append(industry)
        return None if len(lookups) == 1 else real_find(industry)

    monkeypatch.setattr(service, "_find", find_missing_once)
    insight = service.get_insights()

    assert insight.id == winner.id
    assert insight.growth_rate == 7.0
    assert lookups == ["Software", "Software"]
    assert len(completion_client.calls) == 1
    assert db_session.query(IndustryInsight).count() == 1


def test_invalid_json_is_rejected(db_session, user, identity, completion_client):
    completion_client.queue("Sure! Here are the insights you asked for.")

    with pytest.raises(InvalidAIResponse):
        InsightService(db_session, identity, completion_client).get_insights()
    assert db_session.query(IndustryInsight).count() == 0


@pytest.mark.parametrize("overrides", [
    {"demandLevel": "Sky high"},
    {"marketOutlook": "Bullish"},
    {"topSkills": "Go, SQL"},
    {"salaryRanges": [{"role": "Engineer"}]},
])
def test_schema_mismatch_is_rejected(db_session, user, identity, completion_client, overrides):
    completion_client.queue(insight_payload(**overrides))

    with pytest.raises(InvalidAIResponse):
        InsightService(db_session, identity, completion_client).get_insights()
    assert db_session.query(IndustryInsight).count() == 0


def test_missing_field_is_rejected(db_session, user, identity, completion_client):
    data = json.loads(insight_payload())
    del data["keyTrends"]
    completion_client.queue(json.dumps(data))

    with pytest.raises(InvalidAIResponse) as exc_info:
        InsightService(db_session, identity, completion_client).get_insights()
    assert exc_info.value.details["errors"][0]["field"] == "keyTrends"


def test_json_wrapped_in_code_fence_is_accepted(db_session, user, identity, completion_client):
    completion_client.queue(f"```json\n{insight_payload()}\n```")

    insight = InsightService(db_session, identity, completion_client).get_insights()
    assert insight.growth_rate == 12.5


def test_empty_completion(db_session, user, identity, completion_client):
    completion_client.queue("")

    with pytest.raises(EmptyCompletion):
        InsightService(db_session, identity, completion_client).get_insights()


def test_user_without_industry(db_session, completion_client):
    db_session.add(User(principal_id="user_new", skills=[]))
    db_session.commit()

    with pytest.raises(ProfileIncomplete):
        InsightService(db_session, StaticIdentityResolver("user_new"), completion_client).get_insights()
    assert completion_client.calls == []


def test_insights_require_identity(db_session, user, anonymous, stranger, completion_client):
    with pytest.raises(Unauthenticated):
        InsightService(db_session, anonymous, completion_client).get_insights()
    with pytest.raises(UserNotFound):
        InsightService(db_session, stranger, completion_client).get_insights()
    assert db_session.query(IndustryInsight).count() == 0
