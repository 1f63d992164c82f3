import re

# (pattern, replacement) applied in order to a whitespace-collapsed address
ADDRESS_ABBREVIATIONS = [
    (re.compile(r'\b(jl|jalan)\b', re.IGNORECASE), 'Jl.'),
    (re.compile(r'\b(no|nomor)\b', re.IGNORECASE), 'No.'),
    (re.compile(r'\b(rt|rw)\b', re.IGNORECASE), lambda m: m.group(0).upper()),
    (re.compile(r'\b(kel|kelurahan)\b', re.IGNORECASE), 'Kel.'),
    (re.compile(r'\b(kec|kecamatan)\b', re.IGNORECASE), 'Kec.'),
    (re.compile(r'\b(kab|kabupaten)\b', re.IGNORECASE), 'Kab.'),
    (re.compile(r'\b(prov|provinsi)\b', re.IGNORECASE), 'Prov.'),
    (re.compile(r'\b(jl\.)\s+([a-z])', re.IGNORECASE), lambda m: f"{m.group(1)} {m.group(2).upper()}"),
]

NAME_PREFIXES = {'dr', 'dr.', 'prof', 'prof.', 'ir', 'ir.', 's.e', 's.e.', 's.h', 's.h.'}
NAME_SUFFIXES = {'s.e', 's.e.', 's.h', 's.h.', 'm.m', 'm.m.', 'mba', 'mba.'}

def format_indonesian_address(address: str) -> str:
    formatted = re.sub(r'\s+', ' ', address)
    for pattern, replacement in ADDRESS_ABBREVIATIONS:
        formatted = pattern.sub(replacement, formatted)
    return formatted.strip()

def _title_abbreviation(word: str) -> str:
    return word.upper() + ('' if '.' in word else '.')

def format_indonesian_name(name: str) -> str:
    words = name.lower().split(' ')
    last_index = len(words) - 1

    formatted = []
    for index, word in enumerate(words):
        if index == 0 and word in NAME_PREFIXES:
            formatted.append(_title_abbreviation(word))
        elif index == last_index and word in NAME_SUFFIXES:
            formatted.append(_title_abbreviation(word))
        else:
            formatted.append(word[:1].upper() + word[1:])

    return ' '.join(formatted)
