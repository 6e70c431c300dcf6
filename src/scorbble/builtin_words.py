"""Built-in word lists used when the bundled dictionary files cannot be read.

Small on purpose: every two-letter word, the common three-letter words and a
handful of longer ones, so validation still gives useful answers offline.
"""

TWO_LETTER_WORDS = frozenset({
    "aa", "ab", "ad", "ae", "ag", "ah", "ai", "al", "am", "an", "ar", "as",
    "at", "aw", "ax", "ay", "ba", "be", "bi", "bo", "by", "da", "de", "di",
    "do", "ed", "ef", "eh", "el", "em", "en", "er", "es", "et", "ew", "ex",
    "fa", "fe", "gi", "go", "gu", "ha", "he", "hi", "hm", "ho", "id", "if",
    "in", "is", "it", "ja", "jo", "ka", "ki", "la", "li", "lo", "ma", "me",
    "mi", "mm", "mo", "mu", "my", "na", "ne", "no", "nu", "od", "oe", "of",
    "oh", "oi", "ok", "om", "on", "oo", "op", "or", "os", "ou", "ow", "ox",
    "oy", "pa", "pe", "pi", "po", "qi", "re", "sh", "si", "so", "ta", "te",
    "ti", "to", "uh", "um", "un", "up", "ur", "us", "ut", "we", "wo", "xi",
    "xu", "ya", "ye", "yo", "za", "zo",
})

THREE_LETTER_WORDS = frozenset({
    "ace", "act", "add", "ado", "ads", "aft", "age", "ago", "aid", "aim",
    "air", "ale", "all", "and", "ant", "any", "ape", "apt", "arc", "are",
    "ark", "arm", "art", "ash", "ask", "ate", "awe", "awl", "axe", "aye",
    "bad", "bag", "ban", "bar", "bat", "bay", "bed", "bee", "beg", "bet",
    "bib", "bid", "big", "bin", "bit", "boa", "bob", "bod", "bog", "bop",
    "bow", "box", "boy", "bra", "bud", "bug", "bum", "bun", "bur", "bus",
    "but", "buy", "cab", "cad", "cam", "can", "cap", "car", "cat", "caw",
    "cod", "cog", "cop", "cot", "cow", "coy", "cry", "cub", "cud", "cue",
    "cup", "cur", "cut", "dab", "dad", "dam", "day", "den", "dew", "did",
    "die", "dig", "dim", "din", "dip", "doe", "dog", "don", "dot", "dry",
    "dub", "dud", "due", "dug", "dun", "duo", "dye", "ear", "eat", "eel",
    "egg", "ego", "elf", "elk", "elm", "emu", "end", "era", "err", "eve",
    "ewe", "eye", "fab", "fad", "fan", "far", "fat", "fax", "fed", "fee",
    "fen", "few", "fib", "fig", "fin", "fir", "fit", "fix", "fly", "fob",
    "foe", "fog", "fop", "for", "fox", "fry", "fun", "fur", "gab", "gag",
    "gal", "gap", "gas", "gay", "gel", "gem", "get", "gig", "gin", "gnu",
    "gob", "god", "got", "gum", "gun", "gut", "guy", "gym", "had", "hag",
    "ham", "has", "hat", "hay", "hem", "hen", "her", "hew", "hex", "hid",
    "him", "hip", "his", "hit", "hob", "hod", "hoe", "hog", "hop", "hot",
    "how", "hub", "hue", "hug", "hum", "hut", "ice", "icy", "ill", "imp",
    "ink", "inn", "ion", "ire", "irk", "its", "ivy", "jab", "jag", "jam",
    "jar", "jaw", "jay", "jet", "jib", "jig", "job", "jog", "jot", "joy",
    "jug", "jut", "keg", "ken", "key", "kid", "kin", "kit", "lab", "lac",
    "lad", "lag", "lap", "law", "lax", "lay", "lea", "led", "leg", "let",
    "lib", "lid", "lie", "lip", "lit", "lob", "log", "lop", "lot", "low",
    "lug", "mad", "man", "map", "mar", "mat", "maw", "may", "men", "met",
    "mid", "mix", "mob", "mod", "mom", "mop", "mow", "mud", "mug", "mum",
    "nab", "nag", "nap", "nay", "net", "new", "nib", "nil", "nip", "nit",
    "nob", "nod", "nor", "not", "now", "nub", "nun", "nut", "oak", "oar",
    "oat", "odd", "ode", "off", "oft", "ohm", "oil", "old", "one", "opt",
    "orb", "ore", "our", "out", "owe", "owl", "own", "pac", "pad", "pal",
    "pan", "pap", "par", "pat", "paw", "pay", "pea", "peg", "pen", "pep",
    "per", "pet", "pew", "pie", "pig", "pin", "pit", "ply", "pod", "pop",
    "pot", "pow", "pro", "pry", "pub", "pug", "pun", "pup", "pus", "put",
    "qua", "rad", "rag", "ram", "ran", "rap", "rat", "raw", "ray", "red",
    "ref", "rep", "rev", "rib", "rid", "rig", "rim", "rip", "rob", "rod",
    "roe", "rot", "row", "rub", "rug", "rum", "run", "rut", "rye", "sac",
    "sad", "sag", "sap", "sat", "saw", "say", "sea", "set", "sew", "she",
    "shy", "sin", "sip", "sir", "sis", "sit", "six", "ski", "sky", "sly",
    "sob", "sod", "son", "sop", "sot", "sow", "soy", "spa", "spy", "sty",
    "sub", "sue", "sum", "sun", "sup", "tab", "tad", "tag", "tan", "tap",
    "tar", "tat", "tax", "tea", "ten", "the", "thy", "tic", "tie", "tin",
    "tip", "tit", "toe", "tog", "tom", "ton", "too", "top", "tot", "tow",
    "toy", "try", "tub", "tug", "tun", "tut", "two", "ugh", "ump", "uns",
    "ups", "urn", "use", "van", "vat", "vet", "vex", "via", "vie", "vim",
    "vow", "wad", "wag", "war", "was", "wax", "way", "web", "wed", "wee",
    "wet", "who", "why", "wig", "win", "wit", "woe", "wok", "won", "woo",
    "wow", "yak", "yam", "yap", "yaw", "yea", "yep", "yes", "yet", "yew",
    "yin", "yip", "you", "yow", "yup", "zag", "zap", "zed", "zee", "zen",
    "zig", "zip", "zit", "zoo",
})

COMMON_WORDS = frozenset({
    "able", "about", "after", "again", "also", "area", "away", "back", "bake",
    "band", "bank", "best", "bingo", "black", "blank", "board", "bonus",
    "cats", "chair", "dance", "earth", "eight", "faith", "game", "ghost",
    "heart", "house", "jazz", "jinx", "judge", "knife", "large", "lynx",
    "magic", "never", "ocean", "oxen", "paper", "play", "puzzle", "puzzled",
    "quartz", "queen", "quick", "quiz", "radio", "score", "scrabble", "table",
    "tile", "turn", "under", "value", "water", "word", "yacht", "young",
    "zebra", "zero", "zone",
})

BUILTIN_WORDS = TWO_LETTER_WORDS | THREE_LETTER_WORDS | COMMON_WORDS

# Accepted by the international list only (-our, -ise, -re, -ogue, double L, ...)
ALTERNATE_SPELLINGS = frozenset({
    "aeroplane", "aeroplanes", "aluminium", "analogue", "analogues", "annexe",
    "apologise", "apologised", "apologising", "armour", "armoured", "armoury",
    "behaviour", "behaviours", "calibre", "cancelled", "cancelling", "candour",
    "catalogue", "catalogued", "catalogues", "centre", "centred", "centres",
    "cheque", "cheques", "clamour", "colour", "coloured", "colouring",
    "colours", "cosier", "cosiest", "cosy", "counselled", "counselling",
    "counsellor", "criticise", "criticised", "criticising", "defence",
    "defences", "dialogue", "dialogues", "draught", "draughts", "draughty",
    "emphasise", "emphasised", "emphasising", "epilogue", "epilogues",
    "favour", "favoured", "favouring", "favourite", "favourites", "favours",
    "fibre", "fibres", "flavour", "flavoured", "flavouring", "flavours",
    "fulfil", "furore", "gaol", "gaoled", "glamour", "grey", "harbour",
    "harboured", "harbours", "honour", "honourable", "honoured", "honouring",
    "honours", "humour", "humoured", "humouring", "humours", "jewellery",
    "kerb", "kerbs", "labelled", "labelling", "labour", "laboured", "labourer",
    "labouring", "labours", "levelled", "levelling", "licence", "licences",
    "litre", "litres", "lustre", "marvelled", "marvelling", "marvellous",
    "meagre", "memorise", "memorised", "memorising", "metre", "metres",
    "modelled", "modelling", "moustache", "moustaches", "nationalise",
    "nationalised", "neighbour", "neighbourhood", "neighbours", "odour",
    "odours", "offence", "offences", "organise", "organised", "organising",
    "plough", "ploughed", "ploughs", "practise", "practised", "practising",
    "pretence", "privatise", "privatised", "programme", "programmes",
    "prologue", "prologues", "pyjamas", "rancour", "realise", "realised",
    "realising", "recognise", "recognised", "recognising", "rigour", "rumour",
    "rumoured", "rumours", "sabre", "sabres", "savour", "savoured", "savours",
    "savoury", "skilful", "sombre", "specialise", "specialised",
    "specialising", "spectre", "storey", "storeys", "summarise", "summarised",
    "symbolise", "symbolised", "theatre", "theatres", "travelled", "traveller",
    "travellers", "travelling", "tyre", "tyres", "vapour", "vapours", "vigour",
    "visualise", "visualised", "wilful", "woollen",
})
