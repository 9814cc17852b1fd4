from aicloset.core.taxonomy import allowed_values


def _quoted(values: list[str]) -> str:
    return ", ".join(f'"{v}"' for v in values)


def build_system_prompt() -> str:
    return (
        "You are an expert fashion consultant. Analyze the clothing image provided and return "
        "accurate attributes as a single JSON object.\n"
        f"1. category must be one of: {_quoted(allowed_values('category'))}.\n"
        f"2. styles is a list using ONLY: {_quoted(allowed_values('occasion'))}.\n"
        f"3. weather is a list using ONLY: {_quoted(allowed_values('weather'))}.\n"
        f"4. color MUST be one of: {', '.join(allowed_values('color'))}. Choose the closest.\n"
        '5. name is a 2-5 word description like "<Color> <ItemType>" (e.g. "Pink Puffer Jacket").\n'
        "6. confidence is a float between 0 and 1.\n"
        '7. reasoning_tags are short phrases (e.g. ["collared shirt", "linen texture"]).\n'
        "Return ONLY raw JSON with keys name, category, color, styles, weather, confidence, reasoning_tags."
    )


def build_user_prompt(name_hint: str | None, category_hint: str | None) -> str:
    return (
        "Analyze this clothing item. "
        f"Hints from user: Name: {name_hint or 'none'}, Category: {category_hint or 'none'}"
    )
