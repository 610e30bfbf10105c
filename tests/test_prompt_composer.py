from storyboard.core.prompt_composer import QUALITY_SUFFIX, compose
from storyboard.schemas.Scene import Scene
from storyboard.schemas.StyleProfile import StyleProfile

SCENE = Scene(id="s1", scene_number=1, script="Intro.", prompt="A lighthouse in a storm")

PROFILE = StyleProfile(
    character_description="an old keeper with a white beard and yellow raincoat",
    artistic_style="Classic 1990s comic book art",
)


def test_plain_prompt_gets_quality_suffix():
    assert compose(SCENE) == (
        "A lighthouse in a storm. Technical keywords for quality: "
        "masterpiece, best quality, high quality, absurdres, ultra-detailed."
    )


def test_compose_is_deterministic():
    assert compose(SCENE, PROFILE) == compose(SCENE, PROFILE)
    assert compose(SCENE, None) == compose(SCENE, None)


def test_suffix_is_always_trailing():
    assert compose(SCENE).endswith(QUALITY_SUFFIX)
    assert compose(SCENE, PROFILE).endswith(QUALITY_SUFFIX)


def test_styled_prompt_quotes_profile_verbatim():
    prompt = compose(SCENE, PROFILE)

    assert PROFILE.artistic_style in prompt
    assert PROFILE.character_description in prompt
    assert SCENE.prompt in prompt
    assert "MUST strictly conform" in prompt


def test_edited_prompt_is_used():
    edited = SCENE.model_copy(update={"prompt": "A lighthouse at sunrise"})

    assert "sunrise" in compose(edited)
    assert "storm" not in compose(edited)
