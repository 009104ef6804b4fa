from llm_settings.settings import ModelDescriptor, Settings
from llm_settings.view import build_settings_view, resolve_model_name


def _settings(**llm):
    return Settings.model_validate({"llm": {"auth": {"endpoint": "http://x"}, **llm}})


def test_resolve_model_name():
    models = [ModelDescriptor(name="b"), ModelDescriptor(name="a")]
    assert resolve_model_name("a", models) == "a"
    assert resolve_model_name("z", models) == "b"
    assert resolve_model_name(None, models) == "b"
    assert resolve_model_name("a", []) == ""


def test_view_without_models_shows_none_option():
    view = build_settings_view(_settings(model={"name": "a"}))
    assert [(o.value, o.label) for o in view.model_options] == [("", "None")]
    assert view.model == ""
    assert view.endpoint == "http://x"
    assert view.endpoint_placeholder == "http://localhost:11434"
    assert [(o.value, o.label) for o in view.provider_options] == [("ollama", "Ollama")]


def test_view_lists_models_and_current_selection():
    view = build_settings_view(_settings(model={"name": "a"}, availableModels=[{"name": "b"}, {"name": "a"}]))
    assert [o.value for o in view.model_options] == ["b", "a"]
    assert view.model == "a"


def test_stale_selection_is_shown_but_not_pruned():
    settings = _settings(model={"name": "gone"}, availableModels=[{"name": "b"}])
    view = build_settings_view(settings)
    assert view.model == "b"
    assert settings.llm.model == ModelDescriptor(name="gone")


def test_endpoint_placeholder_follows_configured_default(monkeypatch):
    monkeypatch.setenv("LLM_SETTINGS_DEFAULT_ENDPOINT", "http://gpu-box:11434")
    assert build_settings_view(_settings()).endpoint_placeholder == "http://gpu-box:11434"
