import pytest

from app.schemas.voice import Voice
from app.services.murf_service import MurfError
from app.services.voice_catalog import default_voice, fetch_catalog, filter_voices, normalize_voices


ALEX = {"voiceId": "v1", "displayName": "Alex", "locale": "en-US"}
DAISY = {"voiceId": "v2", "displayName": "Daisy", "locale": "en-US"}
MARIA = {"voiceId": "v3", "displayName": "María", "locale": "es-ES", "displayLanguage": "Spanish"}


def test_normalize_array_keeps_order():
    voices = normalize_voices([DAISY, ALEX, MARIA])

    assert [v.voiceId for v in voices] == ["v2", "v1", "v3"]
    assert voices[2].displayLanguage == "Spanish"


def test_normalize_array_is_not_augmented_with_default():
    voices = normalize_voices([ALEX])

    assert voices == [Voice(**ALEX)]


def test_normalize_object_uses_values_in_order():
    voices = normalize_voices({"z": MARIA, "a": ALEX, "m": DAISY})

    assert [v.voiceId for v in voices] == ["v3", "v1", "v2"]


def test_normalize_ignores_unknown_fields():
    voices = normalize_voices([{**ALEX, "styles": ["Conversational"], "gender": "Male"}])

    assert voices == [Voice(**ALEX)]


def test_normalize_skips_invalid_entries():
    voices = normalize_voices([ALEX, "garbage", {"displayName": "No id"}, None, DAISY])

    assert [v.voiceId for v in voices] == ["v1", "v2"]


@pytest.mark.parametrize("data", [None, "voices", 42])
def test_normalize_unexpected_shapes(data):
    assert normalize_voices(data) == []


def test_normalize_error_body_yields_nothing():
    assert normalize_voices({"errorMessage": "Invalid api key", "errorCode": 401}) == []


def test_default_voice_is_daisy():
    voice = default_voice()

    assert voice.voiceId == "en-US-daisy"
    assert voice.locale == "en-US"


@pytest.mark.asyncio
async def test_fetch_catalog_success(fake_murf, default_voice):
    voices, used_fallback = await fetch_catalog(fake_murf, default_voice)

    assert [v.voiceId for v in voices] == ["v1", "v2"]
    assert used_fallback is False
    assert fake_murf.voice_calls == 1


@pytest.mark.asyncio
async def test_fetch_catalog_falls_back_on_error(fake_murf, default_voice):
    fake_murf.voices_error = MurfError("network down")

    voices, used_fallback = await fetch_catalog(fake_murf, default_voice)

    assert voices == [default_voice]
    assert used_fallback is True
    assert fake_murf.voice_calls == 1


@pytest.mark.asyncio
async def test_fetch_catalog_falls_back_on_malformed_body(fake_murf, default_voice):
    fake_murf.voices = {"errorMessage": "Invalid api key"}

    voices, used_fallback = await fetch_catalog(fake_murf, default_voice)

    assert voices == [default_voice]
    assert used_fallback is True


@pytest.mark.asyncio
async def test_fetch_catalog_falls_back_on_empty_list(fake_murf, default_voice):
    fake_murf.voices = []

    voices, used_fallback = await fetch_catalog(fake_murf, default_voice)

    assert voices == [default_voice]
    assert used_fallback is True


def test_filter_scenario():
    catalog = normalize_voices([ALEX, DAISY])

    assert [v.voiceId for v in filter_voices(catalog, "da")] == ["v2"]


@pytest.mark.parametrize("term", ["", "a", "A", "ali", "MAR", "í", "x", " da", "Daisy"])
def test_filter_matches_case_insensitive_containment(term):
    catalog = normalize_voices([ALEX, DAISY, MARIA])

    expected = [v for v in catalog if term.lower() in v.displayName.lower()]

    assert filter_voices(catalog, term) == expected


def test_filter_none_returns_all():
    catalog = normalize_voices([ALEX, DAISY])

    assert filter_voices(catalog, None) == catalog
