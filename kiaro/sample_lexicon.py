"""Small, internally consistent Italian lexicon for demos and tests.

Contents:
- whole-word swaps for a handful of nouns and prepositions
- noun lemmas with singular/plural forms (resolved through their lemma)
- regular verbs of each conjugation and three irregular verbs, with enough
  analyses that every form produced by encryption can be decrypted

A real deployment gets these tables from its own lexicon provider.
"""

# plain -> cipher
SAMPLE_ENCRYPT_MAP = {
    "casa": "porta",
    "porta": "casa",
    "amico": "albero",
    "albero": "amico",
    "gatto": "cane",
    "cane": "gatto",
    "libro": "tavolo",
    "tavolo": "libro",
    "con": "per",
    "per": "con",
    "lasciate": "parlate",
    "telecamere": "telecamere",
}

# cipher -> plain
SAMPLE_DECRYPT_MAP = {cipher: plain for plain, cipher in SAMPLE_ENCRYPT_MAP.items()}

# surface form -> ordered analyses
SAMPLE_FORM_TO_LEMMA_TAGS = {
    # nouns
    "case": [{"lemma": "casa", "tag": "NOUN-F:p"}],
    "porte": [{"lemma": "porta", "tag": "NOUN-F:p"}],
    "gatti": [{"lemma": "gatto", "tag": "NOUN-M:p"}],
    "cani": [{"lemma": "cane", "tag": "NOUN-M:p"}],
    "libri": [{"lemma": "libro", "tag": "NOUN-M:p"}],
    "tavoli": [{"lemma": "tavolo", "tag": "NOUN-M:p"}],
    # -are
    "ama": [{"lemma": "amare", "tag": "VER:ind:pres:S3"}],
    "canta": [{"lemma": "cantare", "tag": "VER:ind:pres:S3"}],
    "lascia": [{"lemma": "lasciare", "tag": "VER:ind:pres:S3"}],
    "parla": [{"lemma": "parlare", "tag": "VER:ind:pres:S3"}],
    "amate": [{"lemma": "amare", "tag": "VER:ind:pres:P2"},
              {"lemma": "amare", "tag": "VER:impr:pres:P2"}],
    "cantate": [{"lemma": "cantare", "tag": "VER:ind:pres:P2"},
                {"lemma": "cantare", "tag": "VER:impr:pres:P2"}],
    "lasciate": [{"lemma": "lasciare", "tag": "VER:ind:pres:P2"},
                 {"lemma": "lasciare", "tag": "VER:impr:pres:P2"}],
    "parlate": [{"lemma": "parlare", "tag": "VER:ind:pres:P2"},
                {"lemma": "parlare", "tag": "VER:impr:pres:P2"}],
    # -ere
    "crede": [{"lemma": "credere", "tag": "VER:ind:pres:S3"}],
    "teme": [{"lemma": "temere", "tag": "VER:ind:pres:S3"}],
    "vede": [{"lemma": "vedere", "tag": "VER:ind:pres:S3"}],
    # -ire
    "dorme": [{"lemma": "dormire", "tag": "VER:ind:pres:S3"}],
    "finisce": [{"lemma": "finire", "tag": "VER:ind:pres:S3"}],
    "parte": [{"lemma": "partire", "tag": "VER:ind:pres:S3"}],
    # irregular
    "va": [{"lemma": "andare", "tag": "VER:ind:pres:S3"}],
    "è": [{"lemma": "essere", "tag": "VER:ind:pres:S3"}],
    "fa": [{"lemma": "fare", "tag": "VER:ind:pres:S3"}],
    "andate": [{"lemma": "andare", "tag": "VER:ind:pres:P2"}],
    "siete": [{"lemma": "essere", "tag": "VER:ind:pres:P2"}],
    "fate": [{"lemma": "fare", "tag": "VER:ind:pres:P2"}],
}

# lemma -> {tag -> surface form}
SAMPLE_LEMMA_TAG_TO_FORM = {
    "casa": {"NOUN-F:s": "casa", "NOUN-F:p": "case"},
    "porta": {"NOUN-F:s": "porta", "NOUN-F:p": "porte"},
    "gatto": {"NOUN-M:s": "gatto", "NOUN-M:p": "gatti"},
    "cane": {"NOUN-M:s": "cane", "NOUN-M:p": "cani"},
    "libro": {"NOUN-M:s": "libro", "NOUN-M:p": "libri"},
    "tavolo": {"NOUN-M:s": "tavolo", "NOUN-M:p": "tavoli"},
    "finire": {"VER:ind:pres:S3": "finisce"},
    "andare": {"VER:ind:pres:S3": "va", "VER:ind:pres:P2": "andate"},
    "essere": {"VER:ind:pres:S3": "è", "VER:ind:pres:P2": "siete"},
    "fare": {"VER:ind:pres:S3": "fa", "VER:ind:pres:P2": "fate"},
}


def build_sample_cipher(**kwargs):
    """KiaroCipher over the sample tables; kwargs go to the constructor."""
    from .cipher import KiaroCipher

    return KiaroCipher(
        SAMPLE_ENCRYPT_MAP,
        SAMPLE_DECRYPT_MAP,
        form_to_lemma_tags=SAMPLE_FORM_TO_LEMMA_TAGS,
        lemma_tag_to_form=SAMPLE_LEMMA_TAG_TO_FORM,
        **kwargs,
    )
