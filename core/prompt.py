# =============================================================================
# core/prompt.py  -  The Content Strategist Prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Holds the fixed instruction template sent to Gemini and the one function
#   that fills it in.  The template never changes between calls; the topic
#   is the only substitution point and it is inserted verbatim, once.
#
# PROMPT STRUCTURE:
#   1. ROLE:      "You are an expert content strategist and editor."
#   2. TASK:      a comprehensive outline for a blog post on the topic
#   3. FORMAT:    multi-level, Roman-numeral headings with bullet sub-points
#   4. EXAMPLE:   a concrete skeleton so the model copies the layout
#
# The topic is not escaped or length-checked.  Whatever the caller sends is
# what the model reads.
# =============================================================================

OUTLINE_PROMPT_TEMPLATE = """You are an expert content strategist and editor.
A user wants to write a blog post about the following topic: "{topic}".

Your task is to generate a comprehensive, well-structured content outline for this blog post.
The outline should be logical, flow well, and cover the key aspects of the topic.
Use a multi-level format with headings and bullet points.

Example Structure:
I. Introduction
   - Hook: Start with a compelling statistic or question.
   - Briefly introduce the topic and its importance.
   - State the main argument or what the reader will learn.
II. Main Point 1
   - Sub-point A
   - Sub-point B
III. Main Point 2
   - Sub-point A
   - Sub-point B
IV. Conclusion
   - Summarize the key points.
   - Offer a final thought or call to action.

Generate the outline now for the topic above.
"""


def build_outline_prompt(topic: str) -> str:
    """Fill the content strategist template with ``topic``.

    ``str.format`` does not re-scan substituted values, so braces or quotes
    inside the topic come through untouched.
    """
    return OUTLINE_PROMPT_TEMPLATE.format(topic=topic)
