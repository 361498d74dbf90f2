# blog/utils.py
import re

_TRANSLIT = {
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e', 'ё': 'yo',
    'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'y', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't', 'у': 'u',
    'ф': 'f', 'х': 'h', 'ц': 'ts', 'ч': 'ch', 'ш': 'sh', 'щ': 'sch',
    'ъ': '', 'ы': 'y', 'ь': '', 'э': 'e', 'ю': 'yu', 'я': 'ya',
    ' ': '-', '_': '-',
}


def transliterate_slug(value, fallback="item", max_length=180):
    """
    ASCII slug from any title, Cyrillic letters transliterated.
    """
    if not value:
        return fallback

    text = "".join(_TRANSLIT.get(ch, ch) for ch in value.lower())

    slug = re.sub(r'[^a-z0-9\-]', '', text)
    slug = re.sub(r'-+', '-', slug).strip('-')

    return (slug or fallback)[:max_length]


def unique_slug(instance, value, fallback="item", max_length=180):
    """
    Slug for `instance` that no other row of its model uses yet.
    Collisions get a numeric suffix: base, base-2, base-3, ...
    """
    # leave room for the -N suffix
    base = transliterate_slug(value, fallback=fallback, max_length=max_length - 10)
    model = type(instance)
    slug = base
    i = 2
    while model._default_manager.filter(slug=slug).exclude(pk=instance.pk).exists():
        slug = f"{base}-{i}"
        i += 1
    return slug
