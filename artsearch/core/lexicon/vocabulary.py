# Path: artsearch/core/lexicon/vocabulary.py
# Purpose: Hold the raw vocabularies behind query analysis.
# Layer: core/lexicon.
# Details: Plain literals only; artsearch/core/lexicon/store.py freezes them into a Lexicon.

from __future__ import annotations

# name -> (keywords, synonyms, weight)
CONCEPTS = {
    "abstract": (
        ["abstract", "non-representational", "geometric", "minimalist", "formless"],
        ["non-figurative", "non-objective", "pure form", "geometric abstraction"],
        0.8,
    ),
    "figurative": (
        ["figurative", "representational", "portrait", "figure", "human", "person"],
        ["human form", "figure study", "character study", "portraiture"],
        0.9,
    ),
    "landscape": (
        ["landscape", "nature", "outdoor", "scenery", "environment", "horizon"],
        ["natural scenery", "outdoor scene", "countryside", "vista", "panorama"],
        0.8,
    ),
    "still_life": (
        ["still life", "objects", "composition", "arrangement", "tabletop"],
        ["object study", "composition study", "domestic scene"],
        0.7,
    ),
    "portrait": (
        ["portrait", "face", "person", "character", "individual", "likeness"],
        ["portraiture", "head study", "character portrait", "facial study"],
        0.9,
    ),
    "urban": (
        ["urban", "city", "street", "architecture", "metropolitan", "cityscape"],
        ["city scene", "urban landscape", "architectural study", "street scene"],
        0.8,
    ),
    "nature": (
        ["nature", "organic", "natural", "biological", "environmental", "wildlife"],
        ["natural world", "organic forms", "biological study", "environmental art"],
        0.8,
    ),
    "spiritual": (
        ["spiritual", "religious", "sacred", "divine", "transcendent", "mystical"],
        ["sacred art", "religious art", "spiritual expression"],
        0.7,
    ),
    "political": (
        ["political", "social", "activist", "protest", "revolutionary", "activism"],
        ["social commentary", "political art", "activist art", "protest art"],
        0.8,
    ),
    "emotional": (
        ["emotional", "expressive", "passionate", "intense", "feeling", "sentiment"],
        ["emotional expression", "expressive art"],
        0.7,
    ),
    "conceptual": (
        ["conceptual", "idea", "concept", "intellectual", "theoretical", "idea-based"],
        ["concept art", "idea art", "intellectual art", "theoretical art"],
        0.8,
    ),
    "surreal": (
        ["surreal", "dreamlike", "fantasy", "unreal", "imaginative", "unconscious"],
        ["surrealist", "dream art", "fantasy art", "imaginative art"],
        0.8,
    ),
    "realistic": (
        ["realistic", "photorealistic", "detailed", "precise", "accurate", "lifelike"],
        ["hyperrealistic", "detailed realism", "precision art"],
        0.8,
    ),
    "narrative": (
        ["story", "narrative", "tale", "chronicle", "sequence", "storytelling"],
        ["narrative art", "story art", "sequential art"],
        0.7,
    ),
    "experimental": (
        ["experimental", "avant-garde", "innovative", "unconventional", "radical"],
        ["experimental art", "innovative art", "radical art"],
        0.8,
    ),
}

EMOTIONS = {
    "joy": ["happy", "joyful", "cheerful", "bright", "uplifting", "positive", "elated", "ecstatic", "thrilled",
            "delighted", "blissful", "euphoric", "radiant", "sunny", "optimistic", "buoyant", "exuberant",
            "gleeful", "merry", "jovial"],
    "sadness": ["sad", "melancholy", "somber", "dark", "depressing", "mournful", "gloomy", "despondent", "dejected",
                "sorrowful", "heartbroken", "devastated", "miserable", "wretched", "forlorn", "desolate", "bleak",
                "dismal", "lugubrious", "funereal"],
    "anger": ["angry", "furious", "intense", "aggressive", "violent", "passionate", "rage", "wrath", "irate",
              "livid", "incensed", "enraged", "outraged", "fuming", "seething", "boiling", "explosive", "volatile",
              "fiery", "tempestuous"],
    "fear": ["scary", "frightening", "dark", "ominous", "threatening", "anxious", "terrified", "petrified",
             "horrified", "alarmed", "apprehensive", "worried", "nervous", "uneasy", "disturbed", "unsettled",
             "daunting", "intimidating", "menacing", "sinister"],
    "love": ["romantic", "loving", "tender", "intimate", "passionate", "affectionate", "adoring", "devoted",
             "cherishing", "fond", "caring", "warm", "gentle", "sweet", "endearing", "enchanting", "captivating",
             "alluring", "bewitching", "mesmerizing"],
    "peace": ["calm", "peaceful", "serene", "tranquil", "meditative", "zen", "quiet", "still", "placid", "composed",
              "relaxed", "soothing", "gentle", "soft", "mellow", "harmonious", "balanced", "centered", "grounded",
              "mindful"],
    "excitement": ["exciting", "dynamic", "energetic", "vibrant", "thrilling", "adventurous", "electrifying",
                   "pulsating", "lively", "animated", "spirited", "enthusiastic", "passionate", "intense",
                   "dramatic", "powerful", "stirring", "rousing", "stimulating", "invigorating"],
    "nostalgia": ["nostalgic", "vintage", "retro", "memories", "past", "sentimental", "reminiscent", "yearning",
                  "longing", "wistful", "melancholic", "bittersweet", "evocative", "poignant", "touching",
                  "moving", "heartfelt", "emotional", "tender"],
    "wonder": ["wonderful", "amazing", "awe-inspiring", "majestic", "breathtaking", "inspiring", "marvelous",
               "spectacular", "magnificent", "stunning", "extraordinary", "remarkable", "incredible", "phenomenal",
               "astounding", "staggering", "overwhelming", "transcendent", "sublime", "divine"],
    "mystery": ["mysterious", "enigmatic", "puzzling", "cryptic", "secretive", "hidden", "obscure", "esoteric",
                "arcane", "inscrutable", "perplexing", "baffling", "intriguing", "fascinating", "curious",
                "unusual", "strange", "eerie", "uncanny", "otherworldly"],
    "hope": ["hopeful", "optimistic", "promising", "bright", "encouraging", "uplifting", "inspiring", "motivating",
             "reassuring", "comforting", "supportive", "positive", "confident", "assured", "certain", "faithful",
             "trusting", "believing", "aspiring", "dreaming"],
    "despair": ["hopeless", "desperate", "bleak", "futile", "pointless", "meaningless", "empty", "void",
                "abandoned", "forsaken", "lost", "trapped", "stuck", "helpless", "powerless", "defeated", "broken",
                "crushed", "overwhelmed", "drowning"],
    "curiosity": ["curious", "inquisitive", "wondering", "questioning", "exploring", "discovering", "investigating",
                  "probing", "seeking", "searching", "adventurous", "open-minded", "receptive", "interested",
                  "engaged", "attentive", "focused", "absorbed", "captivated"],
    "contemplation": ["contemplative", "thoughtful", "reflective", "meditative", "introspective", "philosophical",
                      "deep", "profound", "meaningful", "significant", "weighty", "serious", "solemn", "grave",
                      "earnest", "sincere", "genuine", "authentic"],
    "playfulness": ["playful", "fun", "lighthearted", "whimsical", "cheerful", "merry", "jovial", "humorous",
                    "amusing", "entertaining", "delightful", "charming", "endearing", "cute", "adorable", "sweet",
                    "lovable", "engaging", "captivating", "enchanting"],
    "melancholy": ["melancholic", "pensive", "reflective", "wistful", "bittersweet", "nostalgic", "sad",
                   "sorrowful", "mournful", "gloomy", "somber", "serious", "grave", "solemn"],
    "euphoria": ["euphoric", "ecstatic", "elated", "thrilled", "overjoyed", "delirious", "rapturous", "blissful",
                 "heavenly", "divine", "transcendent", "sublime", "magnificent", "wonderful", "amazing",
                 "incredible", "phenomenal", "extraordinary", "remarkable", "stunning"],
    "tension": ["tense", "strained", "stressed", "anxious", "worried", "nervous", "uneasy", "uncomfortable",
                "restless", "agitated", "disturbed", "unsettled", "troubled", "concerned", "apprehensive",
                "fearful", "scared", "terrified", "panicked", "frantic"],
    "relief": ["relieved", "comforted", "reassured", "calm", "peaceful", "tranquil", "serene", "quiet", "still",
               "composed", "relaxed", "soothed", "healed", "renewed", "refreshed", "restored", "revived",
               "rejuvenated", "reinvigorated", "reborn"],
    "longing": ["longing", "yearning", "craving", "desiring", "wanting", "needing", "seeking", "searching",
                "pursuing", "chasing"],
}

STYLES = {
    "impressionist": ["impressionist", "impressionism", "brushstrokes", "plein air", "en plein air", "atmospheric",
                      "luminous", "loose", "spontaneous", "natural light", "outdoor painting", "monet", "renoir",
                      "degas", "manet", "pissarro", "sisley", "morisot"],
    "expressionist": ["expressionist", "expressionism", "distorted", "dramatic", "raw", "visceral", "subjective",
                      "psychological", "munch", "kandinsky", "kirchner", "nolde", "schmidt-rottluff", "heckel",
                      "pechstein"],
    "cubist": ["cubist", "cubism", "fragmented", "angular", "faceted", "multiple perspectives", "simultaneous",
               "analytical", "picasso", "braque", "gris", "léger", "delaunay", "metzinger", "gleizes"],
    "surrealist": ["surrealist", "surrealism", "dreamlike", "fantasy", "unconscious", "subconscious", "irrational",
                   "bizarre", "fantastic", "magical", "dalí", "dali", "magritte", "ernst", "miro", "tanguy",
                   "chirico"],
    "minimalist": ["minimalist", "minimalism", "simple", "clean", "reduced", "essential", "monochromatic",
                   "sparse", "austere", "stark", "unadorned", "judd", "flavin", "le witt", "reinhardt"],
    "abstract": ["abstract", "non-representational", "non-objective", "pure form", "color field", "hard edge",
                 "lyrical", "gestural", "action painting", "pollock", "rothko", "gorky", "de kooning", "motherwell"],
    "realist": ["realist", "realism", "realistic", "photorealistic", "hyperrealistic", "precise", "accurate",
                "lifelike", "naturalistic", "verisimilitude", "trompe l'oeil", "meticulous", "fine detail"],
    "contemporary": ["contemporary", "modern", "current", "recent", "latest", "fresh", "cutting-edge",
                     "current trends", "21st century", "millennial"],
    "classical": ["classical", "traditional", "academic", "formal", "conventional", "established", "time-honored",
                  "orthodox", "neoclassical", "academic art"],
    "pop": ["pop art", "popular", "commercial", "mass culture", "consumer", "advertising", "comic", "cartoon",
            "warhol", "lichtenstein", "hockney", "oldenburg", "wesselmann", "rosenquist", "thiebaud"],
    "street": ["street art", "graffiti", "underground", "spray", "mural", "public art", "urban art",
               "street culture", "banksy", "basquiat", "haring", "os gemeos", "invader"],
    "digital": ["digital", "computer", "electronic", "virtual", "pixel", "software", "algorithmic", "generative",
                "interactive", "multimedia", "new media", "cyber", "computational", "programmed", "coded"],
    "baroque": ["baroque", "ornate", "elaborate", "theatrical", "grandiose", "flamboyant", "caravaggio", "bernini",
                "rubens", "velázquez", "rembrandt", "vermeer", "poussin", "carracci"],
    "renaissance": ["renaissance", "rebirth", "humanist", "proportional", "perspective", "da vinci",
                    "michelangelo", "raphael", "botticelli", "titian", "donatello", "masaccio", "fra angelico"],
    "romantic": ["romanticism", "romantic", "sublime", "turner", "constable", "friedrich", "goya", "delacroix",
                 "gericault", "blake", "fuseli"],
    "neoclassical": ["neoclassical", "neoclassicism", "classical revival", "antique", "greek", "roman", "ingres",
                     "canova", "thorvaldsen"],
    "art_nouveau": ["art nouveau", "new art", "decorative", "flowing", "curvilinear", "mucha", "toulouse-lautrec",
                    "gaudi", "horta", "guimard", "mackintosh", "beardsley", "klimt"],
    "art_deco": ["art deco", "decorative arts", "streamlined", "luxury", "tamara de lempicka", "jean dupas",
                 "lalique", "chrysler building"],
    "fauvist": ["fauvist", "fauvism", "wild beasts", "matisse", "derain", "vlaminck", "dufy", "marquet"],
    "dada": ["dada", "dadaism", "anti-art", "nonsensical", "absurd", "duchamp", "arp", "schwitters", "tzara",
             "picabia"],
    "constructivist": ["constructivist", "constructivism", "industrial", "utilitarian", "tatlin", "rodchenko",
                       "popova", "lissitzky", "gabo", "pevsner"],
    "de_stijl": ["de stijl", "neoplasticism", "primary colors", "mondrian", "van doesburg", "rietveld"],
    "bauhaus": ["bauhaus", "functional", "gropius", "klee", "albers", "moholy-nagy", "feininger", "schlemmer",
                "itten"],
    "abstract_expressionist": ["abstract expressionist", "abstract expressionism", "action painting", "color field",
                               "gestural", "pollock", "rothko", "de kooning", "kline", "motherwell"],
    "post_impressionist": ["post-impressionist", "post impressionist", "cezanne", "van gogh", "gauguin", "seurat",
                           "signac", "bonnard", "vuillard"],
    "pre_raphaelite": ["pre-raphaelite", "pre raphaelite", "medieval", "rossetti", "millais", "burne-jones",
                       "waterhouse"],
    "symbolist": ["symbolist", "symbolism", "mystical", "moreau", "redon", "puvis de chavannes"],
    "futurist": ["futurist", "futurism", "speed", "technology", "boccioni", "balla", "severini", "russolo"],
    "vorticist": ["vorticist", "vorticism", "vortex", "bomberg", "nevinson", "wadsworth"],
    "suprematist": ["suprematist", "suprematism", "malevich", "kliun"],
    "metaphysical": ["metaphysical", "metaphysical art", "morandi", "savinio", "de pisis", "casorati", "sironi"],
    "magic_realist": ["magic realist", "magical realism", "wyeth", "hopper"],
    "social_realist": ["social realist", "social realism", "workers", "labor", "rivera", "orozco", "siqueiros",
                       "shahn"],
    "regionalist": ["regionalist", "regionalism", "rural", "benton", "curry", "burchfield"],
    "ashcan": ["ashcan", "ashcan school", "sloan", "glackens", "luks", "shinn", "bellows"],
    "hudson_river": ["hudson river", "hudson river school", "bierstadt", "durand", "kensett", "cropsey"],
    "luminist": ["luminist", "luminism", "heade", "gifford", "whittredge"],
    "tonalist": ["tonalist", "tonalism", "moody", "whistler", "twachtman"],
    "american_impressionist": ["american impressionist", "american impressionism", "hassam", "tarbell", "benson"],
    "naive": ["naive", "primitive", "self-taught", "rousseau", "grandma moses"],
    "outsider": ["outsider art", "outsider", "darger", "finster", "tolliver", "ramirez"],
    "folk": ["folk art", "folk", "handmade", "craft", "vernacular"],
    "tribal": ["tribal", "indigenous", "native", "ethnic", "ceremonial", "ritual", "ancestral", "heritage",
               "aboriginal"],
    "contemporary_realist": ["contemporary realist", "contemporary realism", "pearlstein", "estes", "flack",
                             "morley", "cottingham"],
    "neo_expressionist": ["neo-expressionist", "neo expressionist", "new expressionist", "schnabel", "kiefer",
                          "penck", "immendorff", "lüpertz"],
    "post_modern": ["post-modern", "postmodern", "post modern", "eclectic", "ironic", "self-referential",
                    "appropriation", "koons", "hirst", "sherman", "kruger"],
    "conceptual": ["conceptual", "concept art", "kosuth", "baldessari", "nauman", "weiner"],
    "performance": ["performance art", "performance", "happening", "fluxus", "abramovic", "acconci",
                    "schneemann"],
    "installation": ["installation", "immersive", "site-specific", "kabakov", "kienholz", "whiteread", "kapoor",
                     "holzer"],
    "video": ["video art", "video", "moving image", "time-based", "paik", "vostell", "bill viola"],
    "new_media": ["new media", "augmented reality", "interactive installation", "net art"],
    "bio_art": ["bio art", "genetic", "laboratory", "kac", "jeremijenko"],
    "eco_art": ["eco art", "ecological", "sustainable", "climate", "smithson", "goldsworthy"],
}

VISUAL_ELEMENTS = {
    "color": ["color", "colour", "hue", "tone", "palette", "bright", "dark", "vibrant"],
    "composition": ["composition", "layout", "arrangement", "balance", "symmetry"],
    "texture": ["texture", "rough", "smooth", "tactile", "surface"],
    "line": ["line", "linear", "curved", "straight", "flowing"],
    "form": ["form", "shape", "volume", "mass", "structure"],
    "space": ["space", "negative space", "depth", "perspective", "dimension"],
    "light": ["light", "lighting", "shadow", "illumination", "brightness"],
    "movement": ["movement", "motion", "dynamic", "static", "flow"],
}

CULTURAL_CONTEXTS = {
    "african": ["african", "africa", "tribal", "ethnic", "indigenous"],
    "european": ["european", "europe", "western", "classical", "renaissance"],
    "asian": ["asian", "asia", "oriental", "eastern", "zen", "buddhist"],
    "american": ["american", "usa", "contemporary", "modern"],
    "latin": ["latin", "hispanic", "mexican", "south american"],
    "middle_eastern": ["middle eastern", "islamic", "arabic", "persian"],
    "indigenous": ["indigenous", "native", "aboriginal", "first nations"],
    "contemporary": ["contemporary", "modern", "current", "today"],
}

TEMPORAL_CONTEXTS = {
    "ancient": ["ancient", "antique", "old", "historical", "vintage"],
    "medieval": ["medieval", "middle ages", "gothic", "romanesque"],
    "renaissance": ["renaissance", "classical", "baroque", "rococo"],
    "modern": ["modern", "contemporary", "current", "today"],
    "futuristic": ["futuristic", "futurist", "avant-garde", "cutting-edge"],
}

# Checked in this order; the first intent with a keyword wins.
INTENTS = {
    "browse": ["browse", "look", "see", "explore", "discover"],
    "research": ["research", "study", "learn", "understand", "analyze", "analyse"],
    "purchase": ["buy", "purchase", "acquire", "own", "collect"],
    "gift": ["gift", "present", "give", "surprise"],
    "investment": ["investment", "invest", "value", "appreciate", "return"],
}

SENTIMENT = {
    # positive
    "ecstatic": 0.9, "thrilled": 0.8, "excited": 0.7, "happy": 0.6, "pleased": 0.5,
    "joyful": 0.8, "cheerful": 0.6, "delighted": 0.7, "elated": 0.8, "euphoric": 0.9,
    "amazing": 0.8, "wonderful": 0.7, "fantastic": 0.8, "brilliant": 0.7, "outstanding": 0.8,
    "stunning": 0.8, "gorgeous": 0.7, "beautiful": 0.6, "lovely": 0.5, "attractive": 0.4,
    "inspiring": 0.7, "uplifting": 0.6, "love": 0.8, "adore": 0.9, "cherish": 0.8,
    "appreciate": 0.6, "perfect": 0.8, "excellent": 0.7, "superb": 0.8, "magnificent": 0.9,
    # negative
    "devastated": -0.9, "heartbroken": -0.8, "miserable": -0.7, "sad": -0.6, "unhappy": -0.5,
    "angry": -0.6, "furious": -0.8, "disgusted": -0.7, "terrified": -0.8, "scared": -0.6,
    "anxious": -0.5, "worried": -0.4, "hate": -0.8, "despise": -0.9, "dislike": -0.4,
    "awful": -0.7, "terrible": -0.7, "horrible": -0.7, "boring": -0.4, "dull": -0.3,
    "lifeless": -0.5, "disappointed": -0.5, "frustrated": -0.5,
    # mild
    "interesting": 0.2, "intriguing": 0.3, "fascinating": 0.4, "unique": 0.3, "original": 0.3,
    "creative": 0.4, "thoughtful": 0.2,
    # art criticism
    "masterpiece": 0.9, "genius": 0.8, "talented": 0.6, "innovative": 0.6, "groundbreaking": 0.7,
    "expressive": 0.5, "powerful": 0.6, "moving": 0.5, "elegant": 0.5, "refined": 0.4,
    "captivating": 0.7, "mesmerizing": 0.8,
    "amateur": -0.3, "crude": -0.5, "derivative": -0.4, "unoriginal": -0.4, "mediocre": -0.3,
    "overpriced": -0.5, "overrated": -0.4, "underwhelming": -0.3,
}

INTENSIFIERS = {
    "very": 1.5, "extremely": 2.0, "incredibly": 2.0, "absolutely": 1.8,
    "totally": 1.5, "completely": 1.5, "utterly": 1.8, "entirely": 1.3,
    "somewhat": 0.7, "slightly": 0.6, "a bit": 0.6, "kind of": 0.7,
}

NEGATIONS = ["not", "no", "never", "none"]

SPECIFIC_INDICATORS = ["exactly", "precisely", "specifically", "only", "just", "exact"]
VAGUE_INDICATORS = ["something", "anything", "some", "kind of", "sort of", "maybe"]

# cue words -> implicit concept
IMPLICIT_CONCEPTS = {
    "color_focused": ["color", "colour"],
    "texture_focused": ["texture", "surface"],
    "movement_focused": ["movement", "motion"],
    "light_focused": ["light", "shadow"],
    "spatial_focused": ["space", "depth"],
    "form_focused": ["form", "shape"],
    "line_focused": ["line", "linear"],
}

COMPARATIVE_PHRASES = ["better than", "worse than", "compared to"]
CONDITIONAL_WORDS = ["if", "would", "could"]
ART_CONTEXT_WORDS = ["artwork", "painting", "sculpture", "art", "piece", "work"]

# Nouns every catalogue entry shares; they carry no signal for text similarity.
GENERIC_ART_NOUNS = ["art", "arts", "artwork", "artworks", "piece", "pieces", "work", "works"]

STOP_WORDS = [
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "a", "an", "as", "is", "was", "are", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
    "my", "your", "his", "her", "its", "our", "their", "me", "him", "us", "them",
]

MOVEMENT_NAMES = ["impressionism", "expressionism", "cubism", "surrealism", "minimalism", "pop art", "street art"]

RARE_MEDIUMS = ["sculpture", "installation", "mixed media", "digital"]

DEFAULT_TRENDING_SEARCHES = [
    "abstract art", "contemporary painting", "sculpture", "digital art", "mixed media",
    "portrait", "landscape", "minimalist", "colorful", "large artwork",
    "watercolor", "oil painting", "acrylic", "charcoal", "pencil drawing",
    "photography", "collage", "installation", "conceptual art", "street art",
]
