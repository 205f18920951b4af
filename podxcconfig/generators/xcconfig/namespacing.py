from typing import Dict, Mapping


def conditional_less_key(key: str) -> str:
    """
    Strip the bracketed condition from an xcconfig key.

    Everything from the first `[` onward is dropped, so `FOO[sdk=iphoneos*]`
    becomes `FOO`. Keys without a `[` are returned as is.

    Args:
        key: The key to strip.

    Returns:
        The key's base name.
    """
    brackets_index = key.find("[")
    if brackets_index >= 0:
        return key[:brackets_index]
    return key


def add_xcconfig_namespaced_keys(
    source: Mapping[str, str], destination: Mapping[str, str], prefix: str
) -> Dict[str, str]:
    """
    Make the destination settings inherit the namespaced form of the source keys.

    Every key of `source` ends up in the result referencing `${<prefix><base name>}`.
    When the destination already has a non-empty value for the exact same key
    (condition included) that value is kept and the reference is appended to it.
    Destination-only keys pass through untouched. Neither input is modified.

    Args:
        source: The settings whose keys need to be inherited.
        destination: The settings which should inherit the source keys.
        prefix: The namespace of the source settings.

    Returns:
        A new mapping with the destination keys first, in their original order,
        followed by the source-only keys in source order.
    """
    result = dict(destination)
    for key in source:
        prefixed_key = prefix + conditional_less_key(key)
        current_value = destination.get(key)
        if current_value:
            result[key] = f"{current_value} ${{{prefixed_key}}}"
        else:
            result[key] = f"${{{prefixed_key}}}"
    return result
