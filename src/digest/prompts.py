"""Prompt templates for the clean and summarize generation calls."""

CHAINED_SUMMARY_MAX_WORDS = 400
DIRECT_SUMMARY_MAX_WORDS = 600

CLEAN_PROMPT = """\
You are a text cleaner. Do not summarize, rewrite, rephrase, or reduce the \
article in any way.

Your task is to remove:
- Ads and promotional content
- Tracking or affiliate links
- Symbols such as: *, #, ~, etc.
- Make sure the returned content doesn't include markdown symbols
- Redundant headers like "More on this topic", "You might also like", etc.

Keep all actual article text exactly as it is. Do not change grammar, \
spelling, or structure.

Return only the cleaned full article text.

Here is the article to clean:
\"\"\"
{text}
\"\"\"
"""

NEWS_SUMMARY_PROMPT = """\
Summarize the following article in less than {max_words} words, in the tone \
and structure of a professional news report.

Focus on:
- What happened
- Who is involved
- When and where it happened
- Why it matters
- How it unfolded

Be clear, concise, and objective, like a real journalist writing for a major \
publication.

Article content:
{text}
"""

DIRECT_SUMMARY_PROMPT = """\
Please summarize the following article in less than {max_words} words:

{text}
"""


def format_clean_prompt(text: str) -> str:
    return CLEAN_PROMPT.format(text=text)


def format_summary_prompt(
    text: str, max_words: int = CHAINED_SUMMARY_MAX_WORDS, direct: bool = False
) -> str:
    template = DIRECT_SUMMARY_PROMPT if direct else NEWS_SUMMARY_PROMPT
    return template.format(text=text, max_words=max_words)
