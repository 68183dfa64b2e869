from urllib.parse import quote

AVATAR_COLORS = [
    'FF6B6B', # Red
    '4ECDC4', # Teal
    '45B7D1', # Blue
    'F7B731', # Gold
    '5F27CD', # Purple
    '00D2D3', # Cyan
    'FF9FF3', # Pink
    '54A0FF', # Light Blue
    '48DBFB', # Sky Blue
    '1DD1A1', # Green
]


def get_initials(name):
    """'Imam Ahmed Khan' -> 'IA'"""
    return ''.join(word[0] for word in name.split() if word).upper()[:2]


def _name_hash(name):
    # 32-bit signed rolling hash, so a name always maps to the same colour
    value = 0
    for char in name:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def generate_avatar_url(name):
    """Builds an initials avatar URL with a background colour picked from the name."""
    initials = get_initials(name)
    background = AVATAR_COLORS[abs(_name_hash(name)) % len(AVATAR_COLORS)]
    return f"https://ui-avatars.com/api/?name={quote(initials)}&background={background}&color=fff&bold=true&size=150"


def generate_logo_url(name):
    """Default mosque logo: DiceBear initials seeded by the mosque name."""
    return f"https://api.dicebear.com/8.x/initials/svg?seed={quote(name, safe='')}"
