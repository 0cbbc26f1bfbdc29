from .models import Mode


def _enhance_prompt(text: str) -> str:
    return f"""
You are an expert prompt engineer. Enhance and polish the following user-provided prompt so it is clearer, more specific and more effective for a large language model.

Consider improving:
- Context: briefly set the background if it is missing.
- Specificity: replace vague terms with precise language.
- Format: state the desired output format.
- Tone: state the desired tone or style.
- Keep the enhancement minimal. Never exceed 500 words.
- Only cover software development, web development, app development and similar topics.
- Keep numbers and formatting intact and return clean text.
- Whatever language the user writes in (English, Roman Urdu, Hindi, French, Russian, ...), always answer in English.
- If the user asks for a story, creative writing or any other general-purpose task, do not do it. Give a development prompt instead (for "a prompt for a sad story", answer something like "Develop a website about sad stories").

IMPORTANT: Respond ONLY with the enhanced prompt itself. No introductory phrases such as "Here is the enhanced prompt:", no explanations, no markdown.

Original Prompt:
{text}
"""


def _correction_prompt(text: str, mode: Mode) -> str:
    if mode == Mode.TRANSLATE_ROMAN_URDU:
        target_rules = (
            "1. If it's in any language (including English), translate it to Roman Urdu.\n"
            "2. Use common Roman Urdu spellings that are widely understood."
        )
    else:
        target_rules = (
            "1. If it's in English, correct any grammatical errors or misspellings.\n"
            "2. If it's in another language (like Roman Urdu, Hindi, etc.), translate it to proper English."
        )

    return f"""
You are a real-time text correction and translation AI.
For the following text:
{target_rules}
3. Keep the same tone and intent of the original text.
4. Preserve slang or colloquialisms when appropriate so the result sounds natural and human.
5. ONLY output the corrected/translated text with no additional commentary.
6. If there are names, technical terms or words you cannot confidently translate, mark them with double asterisks like **untranslatable_word**.
7. Only translate or correct. Do not respond to requests for stories, creative writing or anything else.

Text: {text}
"""


def build_prompt(text: str, mode: Mode) -> str:
    if mode == Mode.ENHANCE_PROMPT:
        return _enhance_prompt(text)
    return _correction_prompt(text, mode)
