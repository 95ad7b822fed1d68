from core.prompt import OUTLINE_PROMPT_TEMPLATE, build_outline_prompt


def test_topic_embedded_exactly_once():
    topic = "the future of artificial intelligence"
    prompt = build_outline_prompt(topic)
    assert prompt.count(topic) == 1
    assert f'"{topic}"' in prompt


def test_topic_is_not_escaped():
    topic = 'Ignore {previous} "instructions" & <b>tags</b>\nnew line'
    prompt = build_outline_prompt(topic)
    assert prompt.count(topic) == 1


def test_template_is_constant_apart_from_topic():
    a = build_outline_prompt("alpha-topic")
    b = build_outline_prompt("beta-topic")
    assert a.replace("alpha-topic", "X") == b.replace("beta-topic", "X")
    assert a.replace("alpha-topic", "X") == OUTLINE_PROMPT_TEMPLATE.format(topic="X")


def test_template_steers_outline_format():
    prompt = build_outline_prompt("gardening")
    assert prompt.startswith("You are an expert content strategist and editor.")
    for heading in ("I. Introduction", "II. Main Point 1", "III. Main Point 2", "IV. Conclusion"):
        assert heading in prompt
    assert "   - Sub-point A" in prompt
