"""
NNA Layer Taxonomy: canonical code definitions.

These rows are the ground truth for every HFN/MFA conversion; the
reference table is built from this file unless TAXONOMY_DATA_PATH points
at a JSON export with the same row layout.

Address formats:
  HFN  {LAYER}.{CATEGORY}.{SUBCATEGORY}.{SEQUENTIAL}[.{EXT}...]   W.BCH.SUN.001
  MFA  {LAYER#}.{CATEGORY#}.{SUBCATEGORY#}.{SEQUENTIAL}[.{EXT}...] 5.004.003.001

Row order is canonical: it drives enumeration order and breaks ties when
two subcategories share a numeric code (W.BCH.SUN / W.BCH.FES).
"""

# (code, numeric_code, name)
LAYERS: list[tuple[str, str, str]] = [
    ("G", "1", "Songs"),
    ("S", "2", "Stars"),
    ("L", "3", "Looks"),
    ("M", "4", "Moves"),
    ("W", "5", "Worlds"),
    ("B", "6", "Branded"),
    ("P", "7", "Personalize"),
    ("T", "8", "Training_Data"),
    ("C", "9", "Composites"),
    ("R", "10", "Rights"),
]

# (layer, code, numeric_code, name)
CATEGORIES: list[tuple[str, str, str, str]] = [
    # ── G: Songs ─────────────────────────────────────────────────────────────
    ("G", "POP", "001", "Pop"),
    ("G", "RCK", "002", "Rock"),
    ("G", "HIP", "003", "Hip_Hop"),
    ("G", "DNC", "004", "Dance_Electronic"),
    ("G", "DSF", "005", "Disco_Funk"),
    ("G", "RNB", "006", "RnB"),
    ("G", "JZZ", "007", "Jazz"),
    ("G", "JPO", "008", "J_Pop"),
    ("G", "BOL", "009", "Bollywood"),
    ("G", "LAT", "010", "Latin"),
    ("G", "IND", "011", "Indie"),
    ("G", "ALT", "012", "Alternative"),
    ("G", "WLD", "013", "World"),
    ("G", "RFK", "014", "Regional_Folk"),
    ("G", "KPO", "015", "K_Pop"),
    ("G", "HYP", "016", "Hyperpop"),
    ("G", "AFB", "017", "Afrobeats"),
    ("G", "MOD", "018", "Mood_Based"),
    ("G", "BLU", "019", "Blues"),
    ("G", "CLS", "020", "Classical"),
    # ── S: Stars ─────────────────────────────────────────────────────────────
    ("S", "POP", "001", "Pop"),
    ("S", "RCK", "002", "Rock"),
    ("S", "HIP", "003", "Hip_Hop"),
    ("S", "RNB", "004", "RnB"),
    ("S", "DNC", "005", "Dance_Electronic"),
    ("S", "LAT", "006", "Latin"),
    ("S", "IND", "007", "Indie"),
    ("S", "ALT", "008", "Alternative"),
    ("S", "WLD", "009", "World"),
    ("S", "JZZ", "010", "Jazz"),
    ("S", "JPO", "011", "J_Pop"),
    ("S", "BOL", "012", "Bollywood"),
    ("S", "KPO", "013", "K_Pop"),
    ("S", "VAV", "014", "Virtual_Avatars"),
    ("S", "CUL", "015", "Cultural_Icons"),
    ("S", "FAN", "016", "Fantasy"),
    # ── L: Looks ─────────────────────────────────────────────────────────────
    ("L", "PRF", "001", "Modern_Performance"),
    ("L", "TRD", "002", "Traditional_Attire"),
    ("L", "STG", "003", "Stage_Ready"),
    ("L", "CAS", "004", "Casual"),
    ("L", "DSG", "005", "Designer"),
    ("L", "URB", "006", "Urban"),
    ("L", "VIN", "007", "Vintage"),
    ("L", "CUL", "008", "Cultural"),
    ("L", "FUT", "009", "Futuristic"),
    ("L", "FAN", "010", "Fantasy"),
    ("L", "Y2K", "011", "Y2K_Fashion"),
    ("L", "SUS", "012", "Sustainable_Fashion"),
    ("L", "DIG", "013", "Digital_Fashion"),
    ("L", "SPO", "014", "Sportswear"),
    # ── M: Moves ─────────────────────────────────────────────────────────────
    ("M", "POP", "001", "Pop"),
    ("M", "HIP", "002", "Hip-Hop"),
    ("M", "LAT", "003", "Latin"),
    ("M", "TRD", "004", "Traditional"),
    # ── W: Worlds ────────────────────────────────────────────────────────────
    ("W", "CLB", "001", "Dance_Clubs"),
    ("W", "STG", "002", "Concert_Stages"),
    ("W", "URB", "003", "Urban"),
    ("W", "BCH", "004", "Beach"),
    ("W", "NTL", "005", "Natural"),
    ("W", "FAN", "006", "Fantasy"),
    ("W", "FUT", "007", "Futuristic"),
    ("W", "VIR", "008", "Virtual"),
    ("W", "IND", "009", "Industrial"),
    ("W", "RUR", "010", "Rural"),
    ("W", "HST", "011", "Historical"),
    ("W", "CUL", "012", "Cultural"),
    ("W", "ABS", "013", "Abstract"),
    ("W", "RET", "014", "Retro"),
    ("W", "NAT", "015", "Nature"),
    # ── B: Branded ───────────────────────────────────────────────────────────
    ("B", "LUX", "001", "Luxury"),
    ("B", "BEV", "002", "Beverages"),
    # ── P: Personalize ───────────────────────────────────────────────────────
    ("P", "FAC", "001", "Face"),
    ("P", "VOI", "002", "Voice"),
    # ── T: Training Data ─────────────────────────────────────────────────────
    ("T", "SNG", "001", "Songs"),
    ("T", "STR", "002", "Stars"),
    ("T", "LOK", "003", "Looks"),
    ("T", "MOV", "004", "Moves"),
    ("T", "WLD", "005", "Worlds"),
    ("T", "BRD", "006", "Branded"),
    ("T", "PRZ", "007", "Personalize"),
    # ── C: Composites ────────────────────────────────────────────────────────
    ("C", "RMX", "001", "Music_Video_ReMixes"),
    ("C", "SLC", "002", "Star_Look_Combinations"),
    ("C", "FUL", "003", "Full_Composites"),
    ("C", "CMX", "004", "CoMix_Projects"),
    ("C", "UGC", "005", "User_Generated"),
    ("C", "BRM", "006", "Branded_ReMixes"),
    # ── R: Rights ────────────────────────────────────────────────────────────
    ("R", "MVR", "001", "Music_Video_Rights"),
    ("R", "REG", "002", "Regional_Rights"),
    ("R", "USG", "003", "Usage_Rights"),
    ("R", "BRR", "004", "Branded_Rights"),
]

# (layer, category, code, numeric_code, name)
SUBCATEGORIES: list[tuple[str, str, str, str, str]] = [
    # ── G: Songs ─────────────────────────────────────────────────────────────
    ("G", "POP", "BAS", "001", "Base"),
    ("G", "POP", "GLB", "002", "Global_Pop"),
    ("G", "POP", "TEN", "003", "Teen_Pop"),
    ("G", "POP", "DNC", "004", "Dance_Pop"),
    ("G", "POP", "ELC", "005", "Electro_Pop"),
    ("G", "POP", "DRM", "006", "Dream_Pop"),
    ("G", "POP", "IND", "007", "Indie_Pop"),
    ("G", "POP", "LAT", "008", "Latin_Pop"),
    ("G", "POP", "SOU", "009", "Soul_Pop"),
    ("G", "POP", "RCK", "010", "Pop_Rock"),
    ("G", "POP", "ALT", "011", "Alt_Pop"),
    ("G", "POP", "TSW", "012", "Swift_Inspired"),
    ("G", "RCK", "BAS", "001", "Base"),
    ("G", "RCK", "CLS", "002", "Classic_Rock"),
    ("G", "RCK", "MOD", "003", "Modern_Rock"),
    ("G", "RCK", "GRG", "004", "Grunge"),
    ("G", "RCK", "PNK", "005", "Punk_Rock"),
    ("G", "RCK", "ALR", "006", "Alternative_Rock"),
    ("G", "RCK", "PRG", "007", "Progressive_Rock"),
    ("G", "RCK", "PSY", "008", "Psychedelic_Rock"),
    ("G", "RCK", "FLK", "009", "Folk_Rock"),
    ("G", "RCK", "ARN", "010", "Arena_Rock"),
    ("G", "RCK", "GAR", "011", "Garage_Rock"),
    ("G", "RCK", "BLU", "012", "Blues_Rock"),
    ("G", "HIP", "BAS", "001", "Base"),
    ("G", "HIP", "CLS", "002", "Classic_Hip_Hop"),
    ("G", "HIP", "MOD", "003", "Modern_Hip_Hop"),
    ("G", "HIP", "TRP", "004", "Trap"),
    ("G", "HIP", "CLD", "005", "Cloud_Rap"),
    ("G", "HIP", "DRL", "006", "Drill"),
    ("G", "HIP", "CON", "007", "Conscious_Rap"),
    ("G", "HIP", "BBP", "008", "Boom_Bap"),
    ("G", "HIP", "JZZ", "009", "Jazz_Rap"),
    ("G", "HIP", "FNK", "010", "Funk_Rap"),
    ("G", "HIP", "PRT", "011", "Party_Rap"),
    ("G", "DNC", "BAS", "001", "Base"),
    ("G", "DNC", "HSE", "002", "House"),
    ("G", "DNC", "TEC", "003", "Techno"),
    ("G", "DNC", "TRN", "004", "Trance"),
    ("G", "DNC", "DUB", "005", "Dubstep"),
    ("G", "DNC", "FUT", "006", "Future_Bass"),
    ("G", "DNC", "TRO", "007", "Tropical_House"),
    ("G", "DNC", "PRH", "008", "Progressive_House"),
    ("G", "DNC", "DPH", "009", "Deep_House"),
    ("G", "DNC", "TCH", "010", "Tech_House"),
    ("G", "DNC", "EXP", "011", "Experimental_Electronic"),
    ("G", "DSF", "BAS", "001", "Base"),
    ("G", "DSF", "DIS", "002", "Disco"),
    ("G", "DSF", "FNK", "003", "Funk"),
    ("G", "DSF", "NUD", "004", "Nu_Disco"),
    ("G", "RNB", "BAS", "001", "Base"),
    ("G", "RNB", "SOU", "002", "Soul"),
    ("G", "RNB", "MOD", "003", "Modern"),
    ("G", "RNB", "NEO", "004", "Neo_Soul"),
    ("G", "RNB", "GOS", "005", "Gospel"),
    ("G", "RNB", "BLU", "006", "Blues"),
    ("G", "RNB", "FNK", "007", "Funk"),
    ("G", "RNB", "JSU", "008", "Jazz_Soul"),
    ("G", "RNB", "URB", "009", "Urban"),
    ("G", "RNB", "ALT", "010", "Alternative"),
    ("G", "RNB", "FSU", "011", "Future_Soul"),
    ("G", "JZZ", "BAS", "001", "Base"),
    ("G", "JZZ", "CON", "002", "Contemporary_Jazz"),
    ("G", "JZZ", "TRD", "003", "Traditional_Jazz"),
    ("G", "JZZ", "SMO", "004", "Smooth_Jazz"),
    ("G", "JZZ", "AVG", "005", "Avant_Garde_Jazz"),
    ("G", "JZZ", "FUS", "006", "Jazz_Fusion"),
    ("G", "JZZ", "NSJ", "007", "Neo_Soul_Jazz"),
    ("G", "JZZ", "LAT", "008", "Latin_Jazz"),
    ("G", "JZZ", "COO", "009", "Cool_Jazz"),
    ("G", "JZZ", "FRE", "010", "Free_Jazz"),
    ("G", "JZZ", "WLD", "011", "World_Jazz"),
    ("G", "JPO", "BAS", "001", "Base"),
    ("G", "JPO", "POP", "002", "Pop"),
    ("G", "JPO", "RKF", "003", "Rock_Fusion"),
    ("G", "JPO", "ANI", "004", "Anime_Music"),
    ("G", "JPO", "ELC", "005", "Electronic"),
    ("G", "JPO", "KAW", "006", "Kawaii"),
    ("G", "JPO", "ALT", "007", "Alternative"),
    ("G", "JPO", "TRD", "008", "Traditional"),
    ("G", "JPO", "DNC", "009", "Dance"),
    ("G", "JPO", "RET", "010", "Retro"),
    ("G", "JPO", "ACO", "011", "Acoustic"),
    ("G", "BOL", "BAS", "001", "Base"),
    ("G", "BOL", "PLB", "002", "Playback"),
    ("G", "BOL", "PFU", "003", "Pop_Fusion"),
    ("G", "BOL", "CLS", "004", "Classical"),
    ("G", "BOL", "DNC", "005", "Dance"),
    ("G", "BOL", "IFU", "006", "Indie_Fusion"),
    ("G", "BOL", "ELC", "007", "Electronic"),
    ("G", "BOL", "FLK", "008", "Folk"),
    ("G", "BOL", "SFI", "009", "Sufi"),
    ("G", "BOL", "RMX", "010", "Remix"),
    ("G", "BOL", "GLB", "011", "Global"),
    ("G", "LAT", "BAS", "001", "Base"),
    ("G", "LAT", "REG", "002", "Reggaeton"),
    ("G", "LAT", "POP", "003", "Pop"),
    ("G", "LAT", "SAL", "004", "Salsa"),
    ("G", "LAT", "BCH", "005", "Bachata"),
    ("G", "LAT", "RCK", "006", "Rock"),
    ("G", "LAT", "TRP", "007", "Trap"),
    ("G", "LAT", "MER", "008", "Merengue"),
    ("G", "LAT", "JZZ", "009", "Jazz"),
    ("G", "LAT", "CUM", "010", "Cumbia"),
    ("G", "LAT", "FLM", "011", "Flamenco"),
    ("G", "IND", "BAS", "001", "Base"),
    ("G", "IND", "RCK", "002", "Rock"),
    ("G", "IND", "POP", "003", "Pop"),
    ("G", "IND", "FLK", "004", "Folk"),
    ("G", "IND", "ELC", "005", "Electronic"),
    ("G", "IND", "HIP", "006", "Hip_Hop"),
    ("G", "IND", "DRM", "007", "Dream"),
    ("G", "IND", "LOF", "008", "Lo_Fi"),
    ("G", "IND", "ART", "009", "Art"),
    ("G", "IND", "PST", "010", "Post"),
    ("G", "ALT", "BAS", "001", "Base"),
    ("G", "ALT", "RCK", "002", "Rock"),
    ("G", "ALT", "POP", "003", "Pop"),
    ("G", "ALT", "EXP", "004", "Experimental"),
    ("G", "ALT", "DRK", "005", "Dark"),
    ("G", "ALT", "MTL", "006", "Metal"),
    ("G", "ALT", "IND", "007", "Industrial"),
    ("G", "ALT", "ART", "008", "Art"),
    ("G", "ALT", "NOI", "009", "Noise"),
    ("G", "ALT", "PST", "010", "Post"),
    ("G", "ALT", "SHG", "011", "Shoegaze"),
    ("G", "WLD", "BAS", "001", "Base"),
    ("G", "WLD", "FUS", "002", "Fusion"),
    ("G", "WLD", "AFR", "003", "African"),
    ("G", "WLD", "IND", "004", "Indian"),
    ("G", "WLD", "MDE", "005", "Middle_East"),
    ("G", "WLD", "CEL", "006", "Celtic"),
    ("G", "WLD", "REG", "007", "Reggae"),
    ("G", "WLD", "ASN", "008", "Asian"),
    ("G", "WLD", "BAL", "009", "Balkan"),
    ("G", "WLD", "MED", "010", "Mediterranean"),
    ("G", "WLD", "GLB", "011", "Global"),
    ("G", "RFK", "BAS", "001", "Base"),
    ("G", "RFK", "TFK", "002", "Traditional_Folk"),
    ("G", "RFK", "MFK", "003", "Modern_Folk"),
    ("G", "RFK", "CEL", "004", "Celtic"),
    ("G", "RFK", "AFR", "005", "African"),
    ("G", "RFK", "ASN", "006", "Asian"),
    ("G", "RFK", "LAT", "007", "Latin_Folk"),
    ("G", "RFK", "MDE", "008", "Middle_Eastern"),
    ("G", "RFK", "WFU", "009", "World_Fusion"),
    ("G", "RFK", "AMR", "010", "Americana"),
    ("G", "RFK", "GLB", "011", "Global_Folk"),
    ("G", "KPO", "BAS", "001", "Base"),
    ("G", "KPO", "IBG", "002", "Idol_Boy_Group"),
    ("G", "KPO", "IGG", "003", "Idol_Girl_Group"),
    ("G", "KPO", "SFS", "004", "Solo_Female_Star"),
    ("G", "KPO", "SMS", "005", "Solo_Male_Star"),
    ("G", "KPO", "RAP", "006", "Rapper"),
    ("G", "KPO", "DNL", "007", "Dance_Leader"),
    ("G", "KPO", "VIS", "008", "Visual"),
    ("G", "KPO", "VOC", "009", "Vocalist"),
    ("G", "KPO", "MAK", "010", "Maknae"),
    ("G", "HYP", "BAS", "001", "Base"),
    ("G", "HYP", "GLT", "002", "Glitchcore"),
    ("G", "HYP", "SYN", "003", "Synthpop"),
    ("G", "AFB", "BAS", "001", "Base"),
    ("G", "AFB", "NPO", "002", "Nigerian_Pop"),
    ("G", "AFB", "GPO", "003", "Ghanaian_Pop"),
    ("G", "MOD", "BAS", "001", "Base"),
    ("G", "MOD", "HAP", "002", "Happy"),
    ("G", "MOD", "SAD", "003", "Sad"),
    ("G", "MOD", "ENE", "004", "Energetic"),
    ("G", "BLU", "BAS", "001", "Base"),
    ("G", "BLU", "DLT", "002", "Delta_Blues"),
    ("G", "BLU", "CHG", "003", "Chicago_Blues"),
    ("G", "CLS", "BAS", "001", "Base"),
    ("G", "CLS", "ORC", "002", "Orchestral"),
    ("G", "CLS", "CHM", "003", "Chamber"),
    # ── S: Stars ─────────────────────────────────────────────────────────────
    ("S", "POP", "BAS", "001", "Base"),
    ("S", "POP", "DIV", "002", "Pop_Diva_Female_Stars"),
    ("S", "POP", "IDF", "003", "Pop_Idol_Female_Stars"),
    ("S", "POP", "LGF", "004", "Pop_Legend_Female_Stars"),
    ("S", "POP", "LGM", "005", "Pop_Legend_Male_Stars"),
    ("S", "POP", "ICM", "006", "Pop_Icon_Male_Stars"),
    ("S", "POP", "HPM", "007", "Pop_Hipster_Male_Stars"),
    ("S", "POP", "GLB", "008", "Global"),
    ("S", "POP", "TEN", "009", "Teen"),
    ("S", "POP", "DNC", "010", "Dance"),
    ("S", "POP", "ELC", "011", "Electro"),
    ("S", "POP", "DRM", "012", "Dream"),
    ("S", "POP", "IND", "013", "Indie"),
    ("S", "POP", "SOU", "014", "Soul"),
    ("S", "POP", "PNK", "015", "Punk"),
    ("S", "POP", "IDP", "016", "Idol_Pop"),
    ("S", "RCK", "BAS", "001", "Base"),
    ("S", "RCK", "RSF", "002", "Rock_Star_Female_Stars"),
    ("S", "RCK", "RSM", "003", "Rock_Star_Male_Stars"),
    ("S", "RCK", "CLS", "004", "Classic"),
    ("S", "RCK", "MOD", "005", "Modern"),
    ("S", "RCK", "MTL", "006", "Metal"),
    ("S", "RCK", "PNK", "007", "Punk"),
    ("S", "RCK", "ALT", "008", "Alternative"),
    ("S", "RCK", "GRG", "009", "Grunge"),
    ("S", "RCK", "PRG", "010", "Progressive"),
    ("S", "RCK", "IND", "011", "Indie"),
    ("S", "RCK", "PSY", "012", "Psychedelic"),
    ("S", "RCK", "BLU", "013", "Blues"),
    ("S", "HIP", "BAS", "001", "Base"),
    ("S", "HIP", "HPF", "002", "Hip_Hop_Female_Stars"),
    ("S", "HIP", "RAP", "003", "Rap"),
    ("S", "HIP", "TRP", "004", "Trap"),
    ("S", "HIP", "MCS", "005", "MC"),
    ("S", "HIP", "DRL", "006", "Drill"),
    ("S", "HIP", "PRD", "007", "Producer"),
    ("S", "HIP", "MUM", "008", "Mumble"),
    ("S", "RNB", "BAS", "001", "Base"),
    ("S", "RNB", "SOU", "002", "Soul"),
    ("S", "RNB", "MOD", "003", "Modern"),
    ("S", "RNB", "NEO", "004", "Neo_Soul"),
    ("S", "RNB", "GOS", "005", "Gospel"),
    ("S", "RNB", "BLU", "006", "Blues"),
    ("S", "RNB", "FNK", "007", "Funk"),
    ("S", "RNB", "JSU", "008", "Jazz_Soul"),
    ("S", "RNB", "URB", "009", "Urban"),
    ("S", "RNB", "ALT", "010", "Alternative"),
    ("S", "RNB", "FSU", "011", "Future_Soul"),
    ("S", "DNC", "BAS", "001", "Base"),
    ("S", "DNC", "PRD", "002", "Producer"),
    ("S", "DNC", "HSE", "003", "House"),
    ("S", "DNC", "TEC", "004", "Techno"),
    ("S", "DNC", "TRN", "005", "Trance"),
    ("S", "DNC", "DUB", "006", "Dubstep"),
    ("S", "DNC", "FUT", "007", "Future"),
    ("S", "DNC", "DNB", "008", "DnB"),
    ("S", "DNC", "AMB", "009", "Ambient"),
    ("S", "DNC", "LIV", "010", "Live"),
    ("S", "DNC", "EXP", "011", "Experimental"),
    ("S", "LAT", "BAS", "001", "Base"),
    ("S", "LAT", "REG", "002", "Reggaeton"),
    ("S", "LAT", "POP", "003", "Pop"),
    ("S", "LAT", "SAL", "004", "Salsa"),
    ("S", "LAT", "BCH", "005", "Bachata"),
    ("S", "LAT", "RCK", "006", "Rock"),
    ("S", "LAT", "TRP", "007", "Trap"),
    ("S", "LAT", "MER", "008", "Merengue"),
    ("S", "LAT", "JZZ", "009", "Jazz"),
    ("S", "LAT", "CUM", "010", "Cumbia"),
    ("S", "LAT", "FLM", "011", "Flamenco"),
    ("S", "IND", "BAS", "001", "Base"),
    ("S", "IND", "RCK", "002", "Rock"),
    ("S", "IND", "POP", "003", "Pop"),
    ("S", "IND", "FLK", "004", "Folk"),
    ("S", "IND", "ELC", "005", "Electronic"),
    ("S", "IND", "HIP", "006", "Hip_Hop"),
    ("S", "IND", "DRM", "007", "Dream"),
    ("S", "IND", "LOF", "008", "Lo_Fi"),
    ("S", "IND", "ART", "009", "Art"),
    ("S", "IND", "PST", "010", "Post"),
    ("S", "ALT", "BAS", "001", "Base"),
    ("S", "ALT", "RCK", "002", "Rock"),
    ("S", "ALT", "POP", "003", "Pop"),
    ("S", "ALT", "EXP", "004", "Experimental"),
    ("S", "ALT", "DRK", "005", "Dark"),
    ("S", "ALT", "MTL", "006", "Metal"),
    ("S", "ALT", "IND", "007", "Industrial"),
    ("S", "ALT", "ART", "008", "Art"),
    ("S", "ALT", "NOI", "009", "Noise"),
    ("S", "ALT", "PST", "010", "Post"),
    ("S", "ALT", "SHG", "011", "Shoegaze"),
    ("S", "WLD", "BAS", "001", "Base"),
    ("S", "WLD", "FUS", "002", "Fusion"),
    ("S", "WLD", "AFR", "003", "African"),
    ("S", "WLD", "IND", "004", "Indian"),
    ("S", "WLD", "MDE", "005", "Middle_East"),
    ("S", "WLD", "CEL", "006", "Celtic"),
    ("S", "WLD", "REG", "007", "Reggae"),
    ("S", "WLD", "ASN", "008", "Asian"),
    ("S", "WLD", "BAL", "009", "Balkan"),
    ("S", "WLD", "MED", "010", "Mediterranean"),
    ("S", "WLD", "GLB", "011", "Global"),
    ("S", "JZZ", "BAS", "001", "Base"),
    ("S", "JZZ", "CON", "002", "Contemporary"),
    ("S", "JZZ", "TRD", "003", "Traditional"),
    ("S", "JZZ", "SMO", "004", "Smooth"),
    ("S", "JZZ", "EXP", "005", "Experimental"),
    ("S", "JZZ", "LAT", "006", "Latin"),
    ("S", "JZZ", "WLD", "007", "World"),
    ("S", "JPO", "BAS", "001", "Base"),
    ("S", "JPO", "POP", "002", "Pop"),
    ("S", "JPO", "RKF", "003", "Rock_Fusion"),
    ("S", "JPO", "ANI", "004", "Anime_Music"),
    ("S", "JPO", "ELC", "005", "Electronic"),
    ("S", "JPO", "KAW", "006", "Kawaii"),
    ("S", "JPO", "ALT", "007", "Alternative"),
    ("S", "JPO", "TRD", "008", "Traditional"),
    ("S", "JPO", "DNC", "009", "Dance"),
    ("S", "JPO", "RET", "010", "Retro"),
    ("S", "JPO", "ACO", "011", "Acoustic"),
    ("S", "BOL", "BAS", "001", "Base"),
    ("S", "BOL", "PLB", "002", "Playback"),
    ("S", "BOL", "PFU", "003", "Pop_Fusion"),
    ("S", "BOL", "CLS", "004", "Classical"),
    ("S", "BOL", "DNC", "005", "Dance"),
    ("S", "BOL", "IFU", "006", "Indie_Fusion"),
    ("S", "BOL", "ELC", "007", "Electronic"),
    ("S", "BOL", "FLK", "008", "Folk"),
    ("S", "BOL", "SFI", "009", "Sufi"),
    ("S", "BOL", "RMX", "010", "Remix"),
    ("S", "BOL", "GLB", "011", "Global"),
    ("S", "KPO", "BAS", "001", "Base"),
    ("S", "KPO", "IBG", "002", "Idol_Boy_Group"),
    ("S", "KPO", "IGG", "003", "Idol_Girl_Group"),
    ("S", "KPO", "SFS", "004", "Solo_Female_Star"),
    ("S", "KPO", "SMS", "005", "Solo_Male_Star"),
    ("S", "KPO", "RAP", "006", "Rapper"),
    ("S", "KPO", "DNL", "007", "Dance_Leader"),
    ("S", "KPO", "VIS", "008", "Visual"),
    ("S", "KPO", "VOC", "009", "Vocalist"),
    ("S", "KPO", "MAK", "010", "Maknae"),
    ("S", "VAV", "BAS", "001", "Base"),
    ("S", "VAV", "AIG", "002", "AI_Generated_Star"),
    ("S", "VAV", "VTB", "003", "VTuber"),
    ("S", "VAV", "MTA", "004", "Metaverse_Avatar"),
    ("S", "VAV", "CRT", "005", "Cartoon_Star"),
    ("S", "VAV", "FAN", "006", "Fantasy_Character"),
    ("S", "VAV", "RBT", "007", "Robot_Singer"),
    ("S", "VAV", "PIX", "008", "Pixel_Art_Star"),
    ("S", "CUL", "BAS", "001", "Base"),
    ("S", "CUL", "AFB", "002", "Afrobeats_Star"),
    ("S", "CUL", "BOL", "003", "Bollywood_Legend"),
    ("S", "CUL", "LAT", "004", "Latin_Sensation"),
    ("S", "CUL", "JPO", "005", "JPop_Celebrity"),
    ("S", "CUL", "REG", "006", "Reggaeton_Artist"),
    ("S", "CUL", "KAW", "007", "Kawaii_Idol"),
    ("S", "CUL", "DES", "008", "Desi_Star"),
    ("S", "CUL", "CPO", "009", "Chinese_Pop_Icon"),
    ("S", "FAN", "BAS", "001", "Base"),
    ("S", "FAN", "ELF", "002", "Elven_Star"),
    ("S", "FAN", "MGC", "003", "Magical_Star"),
    ("S", "FAN", "DRG", "004", "Dragon_Warrior"),
    # ── L: Looks ─────────────────────────────────────────────────────────────
    ("L", "PRF", "BAS", "001", "Base"),
    ("L", "PRF", "LEO", "002", "Leotard"),
    ("L", "PRF", "SEQ", "003", "Sequined"),
    ("L", "PRF", "LED", "004", "LED"),
    ("L", "PRF", "ATH", "005", "Athletic"),
    ("L", "PRF", "MIN", "006", "Minimalist"),
    ("L", "PRF", "SPK", "007", "Sparkly_Dress"),
    ("L", "TRD", "BAS", "001", "Base"),
    ("L", "TRD", "KIM", "002", "Kimono"),
    ("L", "TRD", "SAR", "003", "Sari"),
    ("L", "TRD", "KLT", "004", "Kilt"),
    ("L", "TRD", "HAN", "005", "Hanbok"),
    ("L", "TRD", "CHG", "006", "Cheongsam"),
    ("L", "STG", "BAS", "001", "Base"),
    ("L", "STG", "BRF", "002", "Black_Ruffled"),
    ("L", "STG", "RLE", "003", "Red_Leather"),
    ("L", "STG", "GCK", "004", "Gold_Cocktail"),
    ("L", "STG", "WBL", "005", "White_Blouse"),
    ("L", "STG", "CGR", "006", "Casual_Grey"),
    ("L", "STG", "TBZ", "007", "Tailored_Blazer"),
    ("L", "STG", "NEO", "008", "Neon"),
    ("L", "STG", "MTL", "009", "Metallic"),
    ("L", "CAS", "BAS", "001", "Base"),
    ("L", "CAS", "STR", "002", "Streetwear"),
    ("L", "CAS", "DNM", "003", "Denim"),
    ("L", "CAS", "ATL", "004", "Athleisure"),
    ("L", "CAS", "BOH", "005", "Boho"),
    ("L", "CAS", "MIN", "006", "Minimal"),
    ("L", "DSG", "BAS", "001", "Base"),
    ("L", "DSG", "COU", "002", "Couture"),
    ("L", "DSG", "RUN", "003", "Runway"),
    ("L", "DSG", "LUX", "004", "Luxury"),
    ("L", "DSG", "HFA", "005", "High_Fashion"),
    ("L", "DSG", "BSP", "006", "Bespoke"),
    ("L", "URB", "BAS", "001", "Base"),
    ("L", "URB", "HIP", "002", "Hip_Hop"),
    ("L", "URB", "GRF", "003", "Graffiti"),
    ("L", "URB", "TEC", "004", "Techwear"),
    ("L", "URB", "SKT", "005", "Skater"),
    ("L", "URB", "PNK", "006", "Punk"),
    ("L", "VIN", "BAS", "001", "Base"),
    ("L", "VIN", "SIX", "002", "60s"),
    ("L", "VIN", "SEV", "003", "70s"),
    ("L", "VIN", "EGT", "004", "80s"),
    ("L", "VIN", "NIN", "005", "90s"),
    ("L", "VIN", "RET", "006", "Retro"),
    ("L", "CUL", "BAS", "001", "Base"),
    ("L", "CUL", "AFR", "002", "African"),
    ("L", "CUL", "IND", "003", "Indian"),
    ("L", "CUL", "MDE", "004", "Middle_Eastern"),
    ("L", "CUL", "LAT", "005", "Latin"),
    ("L", "CUL", "ASN", "006", "Asian"),
    ("L", "FUT", "BAS", "001", "Base"),
    ("L", "FUT", "CYB", "002", "Cyberpunk"),
    ("L", "FUT", "SPC", "003", "Space"),
    ("L", "FUT", "HOL", "004", "Holographic"),
    ("L", "FUT", "TEC", "005", "Tech"),
    ("L", "FUT", "SCI", "006", "Sci_Fi"),
    ("L", "FAN", "BAS", "001", "Base"),
    ("L", "FAN", "MED", "002", "Medieval"),
    ("L", "FAN", "FAI", "003", "Fairy"),
    ("L", "FAN", "MYT", "004", "Mythical"),
    ("L", "FAN", "MAG", "005", "Magical"),
    ("L", "FAN", "ELV", "006", "Elven"),
    ("L", "Y2K", "BAS", "001", "Base"),
    ("L", "Y2K", "E2K", "002", "Early_2000s"),
    ("L", "Y2K", "L9T", "003", "Late_90s"),
    ("L", "Y2K", "MIL", "004", "Millennium"),
    ("L", "Y2K", "POP", "005", "Pop_Princess"),
    ("L", "Y2K", "BOY", "006", "Boy_Band"),
    ("L", "SUS", "BAS", "001", "Base"),
    ("L", "SUS", "UPC", "002", "Upcycled"),
    ("L", "SUS", "ECO", "003", "Eco_Friendly"),
    ("L", "SUS", "MIN", "004", "Minimalist"),
    ("L", "SUS", "NAT", "005", "Natural_Materials"),
    ("L", "SUS", "VRE", "006", "Vintage_Reuse"),
    ("L", "DIG", "BAS", "001", "Base"),
    ("L", "DIG", "NFT", "002", "NFT_Wearables"),
    ("L", "DIG", "DON", "003", "Digital_Only"),
    ("L", "DIG", "ARF", "004", "AR_Fashion"),
    ("L", "DIG", "VCO", "005", "Virtual_Couture"),
    ("L", "DIG", "W3S", "006", "Web3_Style"),
    ("L", "SPO", "BAS", "001", "Base"),
    ("L", "SPO", "TRK", "002", "Tracksuit"),
    ("L", "SPO", "ATH", "003", "Athletic_Wear"),
    ("L", "SPO", "GYM", "004", "Gymwear"),
    # ── M: Moves ─────────────────────────────────────────────────────────────
    ("M", "POP", "BAS", "001", "Base"),
    ("M", "HIP", "BAS", "001", "Base"),
    ("M", "LAT", "BAS", "001", "Base"),
    ("M", "TRD", "BAS", "001", "Base"),
    # ── W: Worlds ────────────────────────────────────────────────────────────
    ("W", "CLB", "BAS", "001", "Base"),
    ("W", "CLB", "NEO", "002", "Neon"),
    ("W", "CLB", "VIP", "003", "VIP_Lounge"),
    ("W", "CLB", "RTF", "004", "Rooftop"),
    ("W", "CLB", "UND", "005", "Underground"),
    ("W", "CLB", "RET", "006", "Retro"),
    ("W", "CLB", "BCH", "007", "Beach_Club"),
    ("W", "STG", "BAS", "001", "Base"),
    ("W", "STG", "ARE", "002", "Arena"),
    ("W", "STG", "FES", "003", "Festival"),
    ("W", "STG", "THE", "004", "Theater"),
    ("W", "STG", "OPE", "005", "Open_Air"),
    ("W", "STG", "LED", "006", "LED_Stage"),
    ("W", "URB", "BAS", "001", "Base"),
    ("W", "URB", "CTY", "002", "City"),
    ("W", "URB", "STR", "003", "Street"),
    ("W", "URB", "SBW", "004", "Subway"),
    ("W", "URB", "SKY", "005", "Skyscraper"),
    ("W", "URB", "MKT", "006", "Market"),
    ("W", "BCH", "BAS", "001", "Base"),
    ("W", "BCH", "TRO", "002", "Tropical"),
    ("W", "BCH", "SUN", "003", "Sunset"),
    ("W", "BCH", "FES", "003", "Festival"),  # shares 003 with SUN; SUN wins reverse lookups
    ("W", "BCH", "WAV", "004", "Waves"),
    ("W", "BCH", "PAL", "005", "Palm"),
    ("W", "NTL", "BAS", "001", "Base"),
    ("W", "NTL", "FOR", "002", "Forest"),
    ("W", "NTL", "MTN", "003", "Mountain"),
    ("W", "NTL", "DSR", "004", "Desert"),
    ("W", "NTL", "LKE", "005", "Lake"),
    ("W", "FAN", "BAS", "001", "Base"),
    ("W", "FAN", "FAI", "002", "Fairy"),
    ("W", "FAN", "DRG", "003", "Dragon"),
    ("W", "FAN", "MAG", "004", "Magic"),
    ("W", "FAN", "ENC", "005", "Enchanted"),
    ("W", "FAN", "MYT", "006", "Mythical"),
    ("W", "FUT", "BAS", "001", "Base"),
    ("W", "FUT", "CYB", "002", "Cyberpunk"),
    ("W", "FUT", "SPC", "003", "Space"),
    ("W", "FUT", "HOL", "004", "Holographic"),
    ("W", "FUT", "TEC", "005", "Tech"),
    ("W", "VIR", "BAS", "001", "Base"),
    ("W", "VIR", "MET", "002", "Metaverse"),
    ("W", "VIR", "SIM", "003", "Simulation"),
    ("W", "VIR", "VRD", "004", "VR_Dreamscape"),
    ("W", "IND", "BAS", "001", "Base"),
    ("W", "IND", "FAC", "002", "Factory"),
    ("W", "IND", "WRH", "003", "Warehouse"),
    ("W", "IND", "MCH", "004", "Machine"),
    ("W", "RUR", "BAS", "001", "Base"),
    ("W", "RUR", "FRM", "002", "Farm"),
    ("W", "RUR", "FLD", "003", "Field"),
    ("W", "RUR", "VIL", "004", "Village"),
    ("W", "HST", "BAS", "001", "Base"),
    ("W", "HST", "MED", "002", "Medieval"),
    ("W", "HST", "REN", "003", "Renaissance"),
    ("W", "HST", "VIC", "004", "Victorian"),
    ("W", "CUL", "BAS", "001", "Base"),
    ("W", "CUL", "AFR", "002", "African"),
    ("W", "CUL", "ASN", "003", "Asian"),
    ("W", "CUL", "LAT", "004", "Latin"),
    ("W", "ABS", "BAS", "001", "Base"),
    ("W", "ABS", "GEO", "002", "Geometric"),
    ("W", "ABS", "SUR", "003", "Surreal"),
    ("W", "ABS", "GLT", "004", "Glitch"),
    ("W", "RET", "BAS", "001", "Base"),
    ("W", "RET", "SIX", "002", "60s"),
    ("W", "RET", "SEV", "003", "70s"),
    ("W", "RET", "EGT", "004", "80s"),
    ("W", "NAT", "BAS", "001", "Base"),
    ("W", "NAT", "FOR", "002", "Forest"),
    ("W", "NAT", "MTN", "003", "Mountain"),
    ("W", "NAT", "OCE", "004", "Ocean"),
    # ── B: Branded ───────────────────────────────────────────────────────────
    ("B", "LUX", "GUC", "001", "Gucci"),
    ("B", "LUX", "PRA", "002", "Prada"),
    ("B", "BEV", "COK", "001", "Coke"),
    # ── P: Personalize ───────────────────────────────────────────────────────
    ("P", "FAC", "SWP", "001", "Swap"),
    ("P", "VOI", "MOD", "001", "Modulation"),
    # ── T: Training Data ─────────────────────────────────────────────────────
    ("T", "SNG", "BAS", "001", "Base"),
    ("T", "SNG", "TFK", "002", "Traditional_Folk"),
    ("T", "SNG", "MFK", "003", "Modern_Folk"),
    ("T", "SNG", "CEL", "004", "Celtic"),
    ("T", "SNG", "AFR", "005", "African"),
    ("T", "SNG", "ASN", "006", "Asian"),
    ("T", "SNG", "LAT", "007", "Latin_Folk"),
    ("T", "SNG", "MDE", "008", "Middle_Eastern"),
    ("T", "SNG", "WFU", "009", "World_Fusion"),
    ("T", "SNG", "AMR", "010", "Americana"),
    ("T", "SNG", "GLB", "011", "Global_Folk"),
    ("T", "SNG", "BLU", "012", "Blues"),
    ("T", "STR", "BAS", "001", "Base"),
    ("T", "STR", "PLB", "002", "Playback"),
    ("T", "STR", "PFU", "003", "Pop_Fusion"),
    ("T", "STR", "CLS", "004", "Classical"),
    ("T", "STR", "DNC", "005", "Dance"),
    ("T", "STR", "IFU", "006", "Indie_Fusion"),
    ("T", "STR", "ELC", "007", "Electronic"),
    ("T", "STR", "FLK", "008", "Folk"),
    ("T", "STR", "SFI", "009", "Sufi"),
    ("T", "STR", "RMX", "010", "Remix"),
    ("T", "STR", "GLB", "011", "Global"),
    ("T", "STR", "PSY", "012", "Psychedelic"),
    ("T", "STR", "BLU", "013", "Blues"),
    ("T", "STR", "SOU", "014", "Soul"),
    ("T", "STR", "PNK", "015", "Punk"),
    ("T", "STR", "FAN", "016", "Fantasy"),
    ("T", "LOK", "BAS", "001", "Base"),
    ("T", "LOK", "MED", "002", "Medieval"),
    ("T", "LOK", "FAI", "003", "Fairy"),
    ("T", "LOK", "MYT", "004", "Mythical"),
    ("T", "LOK", "MAG", "005", "Magical"),
    ("T", "LOK", "ELV", "006", "Elven"),
    ("T", "LOK", "BLZ", "007", "Tailored_Blazer"),
    ("T", "LOK", "NEO", "008", "Neon"),
    ("T", "LOK", "MTL", "009", "Metallic"),
    ("T", "LOK", "SPO", "010", "Sportswear"),
    ("T", "MOV", "BAS", "001", "Base"),
    ("T", "MOV", "MED", "002", "Medieval"),
    ("T", "MOV", "FAI", "003", "Fairy"),
    ("T", "MOV", "CNT", "004", "Contemporary"),
    ("T", "MOV", "TRN", "005", "Trance"),
    ("T", "MOV", "BCH", "006", "Bachata"),
    ("T", "MOV", "AFB", "007", "Afrobeats"),
    ("T", "WLD", "BAS", "001", "Base"),
    ("T", "WLD", "CTY", "002", "City"),
    ("T", "WLD", "STR", "003", "Street"),
    ("T", "WLD", "SBW", "004", "Subway"),
    ("T", "WLD", "SKY", "005", "Skyscraper"),
    ("T", "WLD", "MKT", "006", "Market"),
    ("T", "WLD", "NAT", "007", "Nature"),
    ("T", "BRD", "GUC", "001", "Gucci"),
    ("T", "BRD", "LVU", "002", "Louis_Vuitton"),
    ("T", "BRD", "NKE", "003", "Nike"),
    ("T", "PRZ", "FAC", "001", "Face"),
    ("T", "PRZ", "VOI", "002", "Voice"),
    ("T", "PRZ", "DRS", "003", "Dress"),
    # ── C: Composites ────────────────────────────────────────────────────────
    ("C", "RMX", "POP", "001", "Pop_ReMixes"),
    ("C", "RMX", "RCK", "002", "Rock_ReMixes"),
    ("C", "RMX", "HIP", "003", "Hip_Hop_ReMixes"),
    ("C", "RMX", "EDM", "004", "EDM_ReMixes"),
    ("C", "RMX", "LAT", "005", "Latin_ReMixes"),
    ("C", "RMX", "JZZ", "006", "Jazz_ReMixes"),
    ("C", "SLC", "POP", "001", "Pop"),
    ("C", "SLC", "RCK", "002", "Rock"),
    ("C", "SLC", "HIP", "003", "Hip_Hop"),
    ("C", "SLC", "JZZ", "004", "Jazz"),
    ("C", "FUL", "POP", "001", "Pop"),
    ("C", "FUL", "RCK", "002", "Rock"),
    ("C", "FUL", "LAT", "003", "Latin"),
    ("C", "FUL", "AFB", "004", "Afrobeats"),
    ("C", "CMX", "FRG", "001", "Friend_Groups"),
    ("C", "CMX", "COL", "002", "Creator_Collabs"),
    ("C", "CMX", "BRD", "003", "Brand_Partnerships"),
    ("C", "UGC", "TRN", "001", "Trending"),
    ("C", "UGC", "FEA", "002", "Featured"),
    ("C", "UGC", "STP", "003", "Staff_Picks"),
    ("C", "UGC", "COM", "004", "Community_Favorites"),
    ("C", "BRM", "FAS", "001", "Fashion"),
    ("C", "BRM", "EVT", "002", "Events"),
    ("C", "BRM", "SPN", "003", "Sponsorships"),
    # ── R: Rights ────────────────────────────────────────────────────────────
    ("R", "MVR", "POP", "001", "Pop_Rights"),
    ("R", "MVR", "RCK", "002", "Rock_Rights"),
    ("R", "MVR", "HIP", "003", "Hip_Hop_Rights"),
    ("R", "MVR", "LAT", "004", "Latin_Rights"),
    ("R", "MVR", "JZZ", "005", "Jazz_Rights"),
    ("R", "REG", "GLB", "001", "Global"),
    ("R", "REG", "NAM", "002", "North_America"),
    ("R", "REG", "EUR", "003", "Europe"),
    ("R", "REG", "APC", "004", "Asia_Pacific"),
    ("R", "REG", "LAM", "005", "Latin_America"),
    ("R", "REG", "AFR", "006", "Africa"),
    ("R", "REG", "MDE", "007", "Middle_East"),
    ("R", "REG", "ANZ", "008", "Australia_NZ"),
    ("R", "USG", "COM", "001", "Commercial"),
    ("R", "USG", "NCM", "002", "Non_Commercial"),
    ("R", "USG", "EDU", "003", "Educational"),
    ("R", "USG", "PER", "004", "Personal"),
    ("R", "USG", "BRD", "005", "Brand_Specific"),
    ("R", "USG", "EDT", "006", "Editorial"),
    ("R", "BRR", "LIC", "001", "Licensing"),
    ("R", "BRR", "SPN", "002", "Sponsorship"),
    ("R", "BRR", "COL", "003", "Collaboration"),
]
