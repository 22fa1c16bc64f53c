"""
Placeholder substitution for prompt templates.
"""


def substitute(template: str, placeholder: str, value: str, every: bool = False) -> str:
    """
    Replace the `{placeholder}` token in a template with a literal value.

    Only the first occurrence is replaced unless `every` is True. Braces in
    `value` are not interpreted, so later substitutions can still match tokens
    that arrived inside an earlier value.

    Args:
        template (str): Template text.
        placeholder (str): Placeholder name without braces, e.g. "text".
        value (str): Replacement text.
        every (bool): Replace all occurrences instead of the first one.

    Returns:
        str: The template with the placeholder replaced.
    """
    token = "{" + placeholder + "}"
    return template.replace(token, value) if every else template.replace(token, value, 1)
