"""
Helpers for nested settings trees.
"""


def flatten_settings(settings, key_prefix=''):
    """
    Flatten a nested settings tree into ``{'/a/b/c': leaf}``.

    Nested mappings are walked depth first with the accumulated path;
    anything else (scalars, lists) is a leaf. Input that is not a mapping
    flattens to {}.
    """
    if not isinstance(settings, dict):
        return {}

    result = {}
    # Explicit stack, so arbitrarily deep trees cannot exhaust recursion.
    stack = [(key_prefix, iter(settings.items()))]
    while stack:
        prefix, items = stack[-1]
        for key, value in items:
            path = f'{prefix}/{key}'
            if isinstance(value, dict):
                stack.append((path, iter(value.items())))
                break
            result[path] = value
        else:
            stack.pop()
    return result


def get_setting(settings, path):
    """
    Walk *path* (a sequence of keys) into nested mappings.
    Returns None as soon as a key is missing or a step is not a mapping.
    """
    node = settings
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node
