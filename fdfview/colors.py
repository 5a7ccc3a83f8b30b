"""Named X11 colours, looked up case-insensitively by name."""

from __future__ import annotations

from typing import Iterator

_NAMED_BEFORE_GRAYS: tuple[tuple[str, int], ...] = (
    ("snow", 0xfffafa), ("ghost white", 0xf8f8ff), ("ghostwhite", 0xf8f8ff),
    ("white smoke", 0xf5f5f5), ("whitesmoke", 0xf5f5f5), ("gainsboro", 0xdcdcdc),
    ("floral white", 0xfffaf0), ("floralwhite", 0xfffaf0), ("old lace", 0xfdf5e6),
    ("oldlace", 0xfdf5e6), ("linen", 0xfaf0e6), ("antique white", 0xfaebd7),
    ("antiquewhite", 0xfaebd7), ("papaya whip", 0xffefd5), ("papayawhip", 0xffefd5),
    ("blanched almond", 0xffebcd), ("blanchedalmond", 0xffebcd), ("bisque", 0xffe4c4),
    ("peach puff", 0xffdab9), ("peachpuff", 0xffdab9), ("navajo white", 0xffdead),
    ("navajowhite", 0xffdead), ("moccasin", 0xffe4b5), ("cornsilk", 0xfff8dc),
    ("ivory", 0xfffff0), ("lemon chiffon", 0xfffacd), ("lemonchiffon", 0xfffacd),
    ("seashell", 0xfff5ee), ("honeydew", 0xf0fff0), ("mint cream", 0xf5fffa),
    ("mintcream", 0xf5fffa), ("azure", 0xf0ffff), ("alice blue", 0xf0f8ff),
    ("aliceblue", 0xf0f8ff), ("lavender", 0xe6e6fa), ("lavender blush", 0xfff0f5),
    ("lavenderblush", 0xfff0f5), ("misty rose", 0xffe4e1), ("mistyrose", 0xffe4e1),
    ("white", 0xffffff), ("black", 0x0), ("dark slate", 0x2f4f4f),
    ("darkslategray", 0x2f4f4f), ("dark slate", 0x2f4f4f), ("darkslategrey", 0x2f4f4f),
    ("dim gray", 0x696969), ("dimgray", 0x696969), ("dim grey", 0x696969),
    ("dimgrey", 0x696969), ("slate gray", 0x708090), ("slategray", 0x708090),
    ("slate grey", 0x708090), ("slategrey", 0x708090), ("light slate", 0x778899),
    ("lightslategray", 0x778899), ("light slate", 0x778899),
    ("lightslategrey", 0x778899), ("gray", 0xbebebe), ("grey", 0xbebebe),
    ("light grey", 0xd3d3d3), ("lightgrey", 0xd3d3d3), ("light gray", 0xd3d3d3),
    ("lightgray", 0xd3d3d3), ("midnight blue", 0x191970), ("midnightblue", 0x191970),
    ("navy", 0x80), ("navy blue", 0x80), ("navyblue", 0x80),
    ("cornflower blue", 0x6495ed), ("cornflowerblue", 0x6495ed),
    ("dark slate", 0x483d8b), ("darkslateblue", 0x483d8b), ("slate blue", 0x6a5acd),
    ("slateblue", 0x6a5acd), ("medium slate", 0x7b68ee), ("mediumslateblue", 0x7b68ee),
    ("light slate", 0x8470ff), ("lightslateblue", 0x8470ff), ("medium blue", 0xcd),
    ("mediumblue", 0xcd), ("royal blue", 0x4169e1), ("royalblue", 0x4169e1),
    ("blue", 0xff), ("dodger blue", 0x1e90ff), ("dodgerblue", 0x1e90ff),
    ("deep sky", 0xbfff), ("deepskyblue", 0xbfff), ("sky blue", 0x87ceeb),
    ("skyblue", 0x87ceeb), ("light sky", 0x87cefa), ("lightskyblue", 0x87cefa),
    ("steel blue", 0x4682b4), ("steelblue", 0x4682b4), ("light steel", 0xb0c4de),
    ("lightsteelblue", 0xb0c4de), ("light blue", 0xadd8e6), ("lightblue", 0xadd8e6),
    ("powder blue", 0xb0e0e6), ("powderblue", 0xb0e0e6), ("pale turquoise", 0xafeeee),
    ("paleturquoise", 0xafeeee), ("dark turquoise", 0xced1), ("darkturquoise", 0xced1),
    ("medium turquoise", 0x48d1cc), ("mediumturquoise", 0x48d1cc),
    ("turquoise", 0x40e0d0), ("cyan", 0xffff), ("light cyan", 0xe0ffff),
    ("lightcyan", 0xe0ffff), ("cadet blue", 0x5f9ea0), ("cadetblue", 0x5f9ea0),
    ("medium aquamarine", 0x66cdaa), ("mediumaquamarine", 0x66cdaa),
    ("aquamarine", 0x7fffd4), ("dark green", 0x6400), ("darkgreen", 0x6400),
    ("dark olive", 0x556b2f), ("darkolivegreen", 0x556b2f), ("dark sea", 0x8fbc8f),
    ("darkseagreen", 0x8fbc8f), ("sea green", 0x2e8b57), ("seagreen", 0x2e8b57),
    ("medium sea", 0x3cb371), ("mediumseagreen", 0x3cb371), ("light sea", 0x20b2aa),
    ("lightseagreen", 0x20b2aa), ("pale green", 0x98fb98), ("palegreen", 0x98fb98),
    ("spring green", 0xff7f), ("springgreen", 0xff7f), ("lawn green", 0x7cfc00),
    ("lawngreen", 0x7cfc00), ("green", 0xff00), ("chartreuse", 0x7fff00),
    ("medium spring", 0xfa9a), ("mediumspringgreen", 0xfa9a),
    ("green yellow", 0xadff2f), ("greenyellow", 0xadff2f), ("lime green", 0x32cd32),
    ("limegreen", 0x32cd32), ("yellow green", 0x9acd32), ("yellowgreen", 0x9acd32),
    ("forest green", 0x228b22), ("forestgreen", 0x228b22), ("olive drab", 0x6b8e23),
    ("olivedrab", 0x6b8e23), ("dark khaki", 0xbdb76b), ("darkkhaki", 0xbdb76b),
    ("khaki", 0xf0e68c), ("pale goldenrod", 0xeee8aa), ("palegoldenrod", 0xeee8aa),
    ("light goldenrod", 0xfafad2), ("lightgoldenrodyellow", 0xfafad2),
    ("light yellow", 0xffffe0), ("lightyellow", 0xffffe0), ("yellow", 0xffff00),
    ("gold", 0xffd700), ("light goldenrod", 0xeedd82), ("lightgoldenrod", 0xeedd82),
    ("goldenrod", 0xdaa520), ("dark goldenrod", 0xb8860b), ("darkgoldenrod", 0xb8860b),
    ("rosy brown", 0xbc8f8f), ("rosybrown", 0xbc8f8f), ("indian red", 0xcd5c5c),
    ("indianred", 0xcd5c5c), ("saddle brown", 0x8b4513), ("saddlebrown", 0x8b4513),
    ("sienna", 0xa0522d), ("peru", 0xcd853f), ("burlywood", 0xdeb887),
    ("beige", 0xf5f5dc), ("wheat", 0xf5deb3), ("sandy brown", 0xf4a460),
    ("sandybrown", 0xf4a460), ("tan", 0xd2b48c), ("chocolate", 0xd2691e),
    ("firebrick", 0xb22222), ("brown", 0xa52a2a), ("dark salmon", 0xe9967a),
    ("darksalmon", 0xe9967a), ("salmon", 0xfa8072), ("light salmon", 0xffa07a),
    ("lightsalmon", 0xffa07a), ("orange", 0xffa500), ("dark orange", 0xff8c00),
    ("darkorange", 0xff8c00), ("coral", 0xff7f50), ("light coral", 0xf08080),
    ("lightcoral", 0xf08080), ("tomato", 0xff6347), ("orange red", 0xff4500),
    ("orangered", 0xff4500), ("red", 0xff0000), ("hot pink", 0xff69b4),
    ("hotpink", 0xff69b4), ("deep pink", 0xff1493), ("deeppink", 0xff1493),
    ("pink", 0xffc0cb), ("light pink", 0xffb6c1), ("lightpink", 0xffb6c1),
    ("pale violet", 0xdb7093), ("palevioletred", 0xdb7093), ("maroon", 0xb03060),
    ("medium violet", 0xc71585), ("mediumvioletred", 0xc71585),
    ("violet red", 0xd02090), ("violetred", 0xd02090), ("magenta", 0xff00ff),
    ("violet", 0xee82ee), ("plum", 0xdda0dd), ("orchid", 0xda70d6),
    ("medium orchid", 0xba55d3), ("mediumorchid", 0xba55d3), ("dark orchid", 0x9932cc),
    ("darkorchid", 0x9932cc), ("dark violet", 0x9400d3), ("darkviolet", 0x9400d3),
    ("blue violet", 0x8a2be2), ("blueviolet", 0x8a2be2), ("purple", 0xa020f0),
    ("medium purple", 0x9370db), ("mediumpurple", 0x9370db), ("thistle", 0xd8bfd8),
)

# Families with four numbered shades, in table order.
_NUMBERED_SHADES: tuple[tuple[str, tuple[int, int, int, int]], ...] = (
    ("snow", (0xfffafa, 0xeee9e9, 0xcdc9c9, 0x8b8989)),
    ("seashell", (0xfff5ee, 0xeee5de, 0xcdc5bf, 0x8b8682)),
    ("antiquewhite", (0xffefdb, 0xeedfcc, 0xcdc0b0, 0x8b8378)),
    ("bisque", (0xffe4c4, 0xeed5b7, 0xcdb79e, 0x8b7d6b)),
    ("peachpuff", (0xffdab9, 0xeecbad, 0xcdaf95, 0x8b7765)),
    ("navajowhite", (0xffdead, 0xeecfa1, 0xcdb38b, 0x8b795e)),
    ("lemonchiffon", (0xfffacd, 0xeee9bf, 0xcdc9a5, 0x8b8970)),
    ("cornsilk", (0xfff8dc, 0xeee8cd, 0xcdc8b1, 0x8b8878)),
    ("ivory", (0xfffff0, 0xeeeee0, 0xcdcdc1, 0x8b8b83)),
    ("honeydew", (0xf0fff0, 0xe0eee0, 0xc1cdc1, 0x838b83)),
    ("lavenderblush", (0xfff0f5, 0xeee0e5, 0xcdc1c5, 0x8b8386)),
    ("mistyrose", (0xffe4e1, 0xeed5d2, 0xcdb7b5, 0x8b7d7b)),
    ("azure", (0xf0ffff, 0xe0eeee, 0xc1cdcd, 0x838b8b)),
    ("slateblue", (0x836fff, 0x7a67ee, 0x6959cd, 0x473c8b)),
    ("royalblue", (0x4876ff, 0x436eee, 0x3a5fcd, 0x27408b)),
    ("blue", (0xff, 0xee, 0xcd, 0x8b)),
    ("dodgerblue", (0x1e90ff, 0x1c86ee, 0x1874cd, 0x104e8b)),
    ("steelblue", (0x63b8ff, 0x5cacee, 0x4f94cd, 0x36648b)),
    ("deepskyblue", (0xbfff, 0xb2ee, 0x9acd, 0x688b)),
    ("skyblue", (0x87ceff, 0x7ec0ee, 0x6ca6cd, 0x4a708b)),
    ("lightskyblue", (0xb0e2ff, 0xa4d3ee, 0x8db6cd, 0x607b8b)),
    ("slategray", (0xc6e2ff, 0xb9d3ee, 0x9fb6cd, 0x6c7b8b)),
    ("lightsteelblue", (0xcae1ff, 0xbcd2ee, 0xa2b5cd, 0x6e7b8b)),
    ("lightblue", (0xbfefff, 0xb2dfee, 0x9ac0cd, 0x68838b)),
    ("lightcyan", (0xe0ffff, 0xd1eeee, 0xb4cdcd, 0x7a8b8b)),
    ("paleturquoise", (0xbbffff, 0xaeeeee, 0x96cdcd, 0x668b8b)),
    ("cadetblue", (0x98f5ff, 0x8ee5ee, 0x7ac5cd, 0x53868b)),
    ("turquoise", (0xf5ff, 0xe5ee, 0xc5cd, 0x868b)),
    ("cyan", (0xffff, 0xeeee, 0xcdcd, 0x8b8b)),
    ("darkslategray", (0x97ffff, 0x8deeee, 0x79cdcd, 0x528b8b)),
    ("aquamarine", (0x7fffd4, 0x76eec6, 0x66cdaa, 0x458b74)),
    ("darkseagreen", (0xc1ffc1, 0xb4eeb4, 0x9bcd9b, 0x698b69)),
    ("seagreen", (0x54ff9f, 0x4eee94, 0x43cd80, 0x2e8b57)),
    ("palegreen", (0x9aff9a, 0x90ee90, 0x7ccd7c, 0x548b54)),
    ("springgreen", (0xff7f, 0xee76, 0xcd66, 0x8b45)),
    ("green", (0xff00, 0xee00, 0xcd00, 0x8b00)),
    ("chartreuse", (0x7fff00, 0x76ee00, 0x66cd00, 0x458b00)),
    ("olivedrab", (0xc0ff3e, 0xb3ee3a, 0x9acd32, 0x698b22)),
    ("darkolivegreen", (0xcaff70, 0xbcee68, 0xa2cd5a, 0x6e8b3d)),
    ("khaki", (0xfff68f, 0xeee685, 0xcdc673, 0x8b864e)),
    ("lightgoldenrod", (0xffec8b, 0xeedc82, 0xcdbe70, 0x8b814c)),
    ("lightyellow", (0xffffe0, 0xeeeed1, 0xcdcdb4, 0x8b8b7a)),
    ("yellow", (0xffff00, 0xeeee00, 0xcdcd00, 0x8b8b00)),
    ("gold", (0xffd700, 0xeec900, 0xcdad00, 0x8b7500)),
    ("goldenrod", (0xffc125, 0xeeb422, 0xcd9b1d, 0x8b6914)),
    ("darkgoldenrod", (0xffb90f, 0xeead0e, 0xcd950c, 0x8b6508)),
    ("rosybrown", (0xffc1c1, 0xeeb4b4, 0xcd9b9b, 0x8b6969)),
    ("indianred", (0xff6a6a, 0xee6363, 0xcd5555, 0x8b3a3a)),
    ("sienna", (0xff8247, 0xee7942, 0xcd6839, 0x8b4726)),
    ("burlywood", (0xffd39b, 0xeec591, 0xcdaa7d, 0x8b7355)),
    ("wheat", (0xffe7ba, 0xeed8ae, 0xcdba96, 0x8b7e66)),
    ("tan", (0xffa54f, 0xee9a49, 0xcd853f, 0x8b5a2b)),
    ("chocolate", (0xff7f24, 0xee7621, 0xcd661d, 0x8b4513)),
    ("firebrick", (0xff3030, 0xee2c2c, 0xcd2626, 0x8b1a1a)),
    ("brown", (0xff4040, 0xee3b3b, 0xcd3333, 0x8b2323)),
    ("salmon", (0xff8c69, 0xee8262, 0xcd7054, 0x8b4c39)),
    ("lightsalmon", (0xffa07a, 0xee9572, 0xcd8162, 0x8b5742)),
    ("orange", (0xffa500, 0xee9a00, 0xcd8500, 0x8b5a00)),
    ("darkorange", (0xff7f00, 0xee7600, 0xcd6600, 0x8b4500)),
    ("coral", (0xff7256, 0xee6a50, 0xcd5b45, 0x8b3e2f)),
    ("tomato", (0xff6347, 0xee5c42, 0xcd4f39, 0x8b3626)),
    ("orangered", (0xff4500, 0xee4000, 0xcd3700, 0x8b2500)),
    ("red", (0xff0000, 0xee0000, 0xcd0000, 0x8b0000)),
    ("deeppink", (0xff1493, 0xee1289, 0xcd1076, 0x8b0a50)),
    ("hotpink", (0xff6eb4, 0xee6aa7, 0xcd6090, 0x8b3a62)),
    ("pink", (0xffb5c5, 0xeea9b8, 0xcd919e, 0x8b636c)),
    ("lightpink", (0xffaeb9, 0xeea2ad, 0xcd8c95, 0x8b5f65)),
    ("palevioletred", (0xff82ab, 0xee799f, 0xcd6889, 0x8b475d)),
    ("maroon", (0xff34b3, 0xee30a7, 0xcd2990, 0x8b1c62)),
    ("violetred", (0xff3e96, 0xee3a8c, 0xcd3278, 0x8b2252)),
    ("magenta", (0xff00ff, 0xee00ee, 0xcd00cd, 0x8b008b)),
    ("orchid", (0xff83fa, 0xee7ae9, 0xcd69c9, 0x8b4789)),
    ("plum", (0xffbbff, 0xeeaeee, 0xcd96cd, 0x8b668b)),
    ("mediumorchid", (0xe066ff, 0xd15fee, 0xb452cd, 0x7a378b)),
    ("darkorchid", (0xbf3eff, 0xb23aee, 0x9a32cd, 0x68228b)),
    ("purple", (0x9b30ff, 0x912cee, 0x7d26cd, 0x551a8b)),
    ("mediumpurple", (0xab82ff, 0x9f79ee, 0x8968cd, 0x5d478b)),
    ("thistle", (0xffe1ff, 0xeed2ee, 0xcdb5cd, 0x8b7b8b)),
)

# Levels of gray0 .. gray100; each is listed as both "grayN" and "greyN".
_GRAY_LEVELS: tuple[int, ...] = (
    0x0, 0x30303, 0x50505, 0x80808, 0xa0a0a, 0xd0d0d, 0xf0f0f, 0x121212,
    0x141414, 0x171717, 0x1a1a1a, 0x1c1c1c, 0x1f1f1f, 0x212121, 0x242424,
    0x262626, 0x292929, 0x2b2b2b, 0x2e2e2e, 0x303030, 0x333333, 0x363636,
    0x383838, 0x3b3b3b, 0x3d3d3d, 0x404040, 0x424242, 0x454545, 0x474747,
    0x4a4a4a, 0x4d4d4d, 0x4f4f4f, 0x525252, 0x545454, 0x575757, 0x595959,
    0x5c5c5c, 0x5e5e5e, 0x616161, 0x636363, 0x666666, 0x696969, 0x6b6b6b,
    0x6e6e6e, 0x707070, 0x737373, 0x757575, 0x787878, 0x7a7a7a, 0x7d7d7d,
    0x7f7f7f, 0x828282, 0x858585, 0x878787, 0x8a8a8a, 0x8c8c8c, 0x8f8f8f,
    0x919191, 0x949494, 0x969696, 0x999999, 0x9c9c9c, 0x9e9e9e, 0xa1a1a1,
    0xa3a3a3, 0xa6a6a6, 0xa8a8a8, 0xababab, 0xadadad, 0xb0b0b0, 0xb3b3b3,
    0xb5b5b5, 0xb8b8b8, 0xbababa, 0xbdbdbd, 0xbfbfbf, 0xc2c2c2, 0xc4c4c4,
    0xc7c7c7, 0xc9c9c9, 0xcccccc, 0xcfcfcf, 0xd1d1d1, 0xd4d4d4, 0xd6d6d6,
    0xd9d9d9, 0xdbdbdb, 0xdedede, 0xe0e0e0, 0xe3e3e3, 0xe5e5e5, 0xe8e8e8,
    0xebebeb, 0xededed, 0xf0f0f0, 0xf2f2f2, 0xf5f5f5, 0xf7f7f7, 0xfafafa,
    0xfcfcfc, 0xffffff,
)

_NAMED_AFTER_GRAYS: tuple[tuple[str, int], ...] = (
    ("dark grey", 0xa9a9a9), ("darkgrey", 0xa9a9a9), ("dark gray", 0xa9a9a9),
    ("darkgray", 0xa9a9a9), ("dark blue", 0x8b), ("darkblue", 0x8b),
    ("dark cyan", 0x8b8b), ("darkcyan", 0x8b8b), ("dark magenta", 0x8b008b),
    ("darkmagenta", 0x8b008b), ("dark red", 0x8b0000), ("darkred", 0x8b0000),
    ("light green", 0x90ee90), ("lightgreen", 0x90ee90),
    # "none" marks a transparent colour.
    ("none", -1),
)


def _table() -> Iterator[tuple[str, int]]:
    """Every (name, colour) entry in lookup order, duplicates included."""
    yield from _NAMED_BEFORE_GRAYS
    for family, shades in _NUMBERED_SHADES:
        for number, value in enumerate(shades, start=1):
            yield f"{family}{number}", value
    for level, value in enumerate(_GRAY_LEVELS):
        yield f"gray{level}", value
        yield f"grey{level}", value
    yield from _NAMED_AFTER_GRAYS


def _build_index() -> dict[str, int]:
    index: dict[str, int] = {}
    for name, value in _table():
        # The first entry for a name wins, as in a front-to-back search.
        index.setdefault(name.lower(), value)
    return index


_INDEX: dict[str, int] = _build_index()
_NAMES: tuple[str, ...] = tuple(dict.fromkeys(name for name, _ in _table()))


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value for a colour name, ignoring case.

    "none" gives -1. Raises KeyError for a name that is not known.
    """
    if not isinstance(name, str):
        raise TypeError("colour name must be a string")
    try:
        return _INDEX[name.lower()]
    except KeyError:
        raise KeyError(name) from None


def color_names() -> tuple[str, ...]:
    """All known colour names, each once, in table order."""
    return _NAMES