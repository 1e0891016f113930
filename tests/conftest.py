import pytest

from kbdsim.layout.transform import transform

SWEDISH_DEFAULT = """
§ 1 2 3 4 5 6 7 8 9 0 + ´
q w e r t y u i o p å ¨
a s d f g h j k l ö ä '
< z x c v b n m , . -
"""

SWEDISH_SHIFT = """
° ! " # € % & / ( ) = ? `
Q W E R T Y U I O P Å ^
A S D F G H J K L Ö Ä *
> Z X C V B N M ; : _
"""

SWEDISH_CAPS = """
§ 1 2 3 4 5 6 7 8 9 0 + ´
Q W E R T Y U I O P Å ¨
A S D F G H J K L Ö Ä '
< Z X C V B N M , . -
"""

SWEDISH_CAPS_SHIFT = """
° ! " # € % & / ( ) = ? `
q w e r t y u i o p å ^
a s d f g h j k l ö ä *
> z x c v b n m ; : _
"""

SWEDISH_ALT = """
¶ © ™ £ $ ∞ § | [ ] ≈ ± \\u{0}
• Ω é ® † µ ü ı œ π ˙ ~
ˆ ß ∂ ƒ ¸ ˛ √ ª ﬁ ø æ @
≤ ÷ ≈ ç ‹ › ‘ ’ ‚ … –
"""

CYRILLIC_DEFAULT = """
ё 1 2 3 4 5 6 7 8 9 0 - =
й ц у к е н г ш щ з х ъ
ф ы в а п р о л д ж э \\
\\ я ч с м и т ь б ю .
"""

CYRILLIC_SHIFT = """
Ё ! " № ; % : ? * ( ) _ +
Й Ц У К Е Н Г Ш Щ З Х Ъ
Ф Ы В А П Р О Л Д Ж Э /
/ Я Ч С М И Т Ь Б Ю ,
"""

CYRILLIC_CAPS = """
Ё 1 2 3 4 5 6 7 8 9 0 - =
Й Ц У К Е Н Г Ш Щ З Х Ъ
Ф Ы В А П Р О Л Д Ж Э \\
\\ Я Ч С М И Т Ь Б Ю .
"""

CYRILLIC_CAPS_SHIFT = """
ё ! " № ; % : ? * ( ) _ +
й ц у к е н г ш щ з х ъ
ф ы в а п р о л д ж э /
/ я ч с м и т ь б ю ,
"""

IOS_DEFAULT = """
q w e r t y u i o p å
a s d f g h j k l ö ä
\\s{shift} \\s{spacer:0.5} z x c v b n m \\s{backspace}
"""

IOS_SHIFT = """
Q W E R T Y U I O P Å
A S D F G H J K L Ö Ä
\\s{shift} \\s{spacer:0.5} Z X C V B N M \\s{backspace}
"""

IOS_SYMBOLS_1 = """
1 2 3 4 5 6 7 8 9 0 ´
- / : ; ( ) kr & @ "
\\s{shift} . , ? ! ' \\s{backspace}
"""

IOS_SYMBOLS_2 = """
[ ] { } # % ^ * + = `
_ \\ | ~ < > € $ £
\\s{shift} . , ? ! ' \\s{backspace}
"""

IPAD_DEFAULT = """
\\s{spacer:0.5} q w e r t y u i o p å \\s{backspace:1.75}
a s d f g h j k l ö ä \\s{return}
\\s{shift} z x c v b n m , . \\s{shift}
"""


@pytest.fixture
def swedish_definition():
    return {
        "displayNames": {"sv": "Svenska"},
        "locale": "sv",
        "macOS": {
            "primary": {
                "layers": {
                    "default": SWEDISH_DEFAULT,
                    "shift": SWEDISH_SHIFT,
                    "caps": SWEDISH_CAPS,
                    "caps+shift": SWEDISH_CAPS_SHIFT,
                    "alt": SWEDISH_ALT,
                },
            },
            "space": {"default": " ", "alt": "\u00a0"},
            "transforms": {"´": {"a": "á", "e": "é", "o": "ó", " ": "´"}},
        },
        "windows": {
            "layers": {
                "default": SWEDISH_DEFAULT,
                "shift": SWEDISH_SHIFT,
            },
        },
        "iOS": {
            "primary": {
                "layers": {
                    "default": IOS_DEFAULT,
                    "shift": IOS_SHIFT,
                    "symbols-1": IOS_SYMBOLS_1,
                    "symbols-2": IOS_SYMBOLS_2,
                },
            },
            "iPad-9in": {"layers": {"default": IPAD_DEFAULT}},
        },
        "android": {
            "primary": {
                "layers": {
                    "default": IOS_DEFAULT,
                    "shift": IOS_SHIFT,
                },
            },
        },
        "transforms": {
            "´": {"a": "á", "e": "é"},
            "¨": {"a": "ä", "o": "ö", "u": "ü", " ": "¨"},
            "`": {"a": "à", "e": "è"},
        },
    }


@pytest.fixture
def cyrillic_definition():
    return {
        "macOS": {
            "primary": {
                "layers": {
                    "default": CYRILLIC_DEFAULT,
                    "shift": CYRILLIC_SHIFT,
                    "caps": CYRILLIC_CAPS,
                    "caps+shift": CYRILLIC_CAPS_SHIFT,
                },
            },
        },
    }


@pytest.fixture
def swedish_layout(swedish_definition):
    return transform(swedish_definition, "macOS", source_id="sv", layout_name="sv")


@pytest.fixture
def qwe_layout():
    return transform(
        {"macOS": {"primary": {"layers": {"default": "q w e", "shift": "Q W E"}}}},
        "macOS",
        source_id="test",
        layout_name="qwe",
    )
