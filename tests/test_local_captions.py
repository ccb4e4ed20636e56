from viral_clip_factory.infrastructure.llm.fallback_client import LocalCaptionProvider


def test_title_uses_first_eight_words_with_exclamation():
    captions = LocalCaptionProvider().generate("one two three four five six seven eight nine ten")

    assert captions.title == "one two three four five six seven eight!"
    assert captions.source == "local"


def test_long_title_is_truncated_with_ellipsis():
    words = " ".join(["abcdefghijkl"] * 10)

    title = LocalCaptionProvider().generate(words).title

    assert len(title) == 80
    assert title.endswith("...")


def test_description_is_truncated_past_450_chars():
    text = "word " * 120

    captions = LocalCaptionProvider().generate(text)

    assert len(captions.description) == 450
    assert captions.description.endswith("...")
    assert LocalCaptionProvider().generate("short text").description == "short text"


def test_hashtags_fill_budget_with_keywords_and_drop_trending():
    text = "This incredible discovery changed everything about science forever"

    hashtags = LocalCaptionProvider().generate(text).hashtags

    assert hashtags == ["#Shorts", "#Viral", "#Podcast", "#Incredible", "#Discovery"]


def test_hashtags_keep_trending_with_single_keyword():
    hashtags = LocalCaptionProvider().generate("we saw a volcano").hashtags

    assert hashtags == ["#Shorts", "#Viral", "#Podcast", "#Volcano", "#Trending"]


def test_hashtags_without_keywords_are_seed_and_trending():
    hashtags = LocalCaptionProvider().generate("so it is what it is").hashtags

    assert hashtags == ["#Shorts", "#Viral", "#Podcast", "#Trending"]


def test_hashtag_keywords_strip_punctuation():
    hashtags = LocalCaptionProvider().generate("Wow, amazing!!! ok").hashtags

    assert "#Amazing" in hashtags


def test_local_captions_are_deterministic():
    provider = LocalCaptionProvider()
    text = "Nobody tells you the truth about compound interest and early savings"

    assert provider.generate(text) == provider.generate(text)
    assert LocalCaptionProvider().is_configured()
