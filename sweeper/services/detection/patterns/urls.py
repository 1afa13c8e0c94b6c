"""
Sweeper URL Pattern Tables

Case-insensitive regular expressions over domain names and path fragments.
Off-platform redirects are the primary indicator of spam/scam DMs.
"""

from typing import List

# =============================================================================
# HIGH RISK (instant red flag)
# =============================================================================

HIGH_RISK_URL_PATTERNS: List[str] = [
    r"([01]inance|c[0o]inbase|met[a4]m[a4]sk|tr[u0]st|w[a4]llet)",
    r"admireme\.vip",
    r"adulttime\.com",
    r"api\.whatsapp\.com",      # WhatsApp API links
    r"b1anca\.com",
    r"binance-",                # fake Binance domains
    r"biolnk\.at",
    r"carrd\.co",
    r"chat\.whatsapp\.com",     # WhatsApp groups
    r"claim-",
    r"coinbase-",               # fake Coinbase domains
    r"dapp-",
    r"direct\.me",
    r"fancentro\.com",
    r"fans\.ly",
    r"fansly\.com",
    r"fanvue\.com",
    r"iwantclips\.com",
    r"justfor\.fans",
    r"lnk\.bio",
    r"loyalfans\.com",
    r"maloum\.com",
    r"manyvids\.com",
    r"metamask-",               # fake MetaMask domains
    r"msha\.ke",
    r"my\.club",
    r"my69private\.site",
    r"mym\.fans",
    r"onlyfans\.com",
    r"onsx\.fun",
    r"pancakeswap-",
    r"phantom-",
    r"revoke\.cash",
    r"sextpanther\.com",
    r"slushy\.com",
    r"socialtap\.me",
    r"t\.me/",                  # Telegram
    r"taplink\.cc",
    r"telegram\.me",
    r"telegram\.org",
    r"throne\.com",
    r"trustwallet",
    r"uniswap-",
    r"wa\.me/",                 # WhatsApp shortlinks
    r"walletconnect",
]

# =============================================================================
# MEDIUM RISK (suspicious, needs review)
# =============================================================================

# Generic shorteners, link-in-bio aggregators and invite links
MEDIUM_RISK_URL_PATTERNS: List[str] = [
    r"/airdrop",
    r"/crypto",
    r"/giveaway",
    r"/investment",
    r"/trading",
    r"adf\.ly/",
    r"allmylinks\.com",
    r"allmysocial\.me",
    r"beacons\.ai",
    r"bio\.link",
    r"bio\.site",
    r"bit\.do",
    r"bit\.ly/",
    r"bl\.ink",
    r"buff\.ly/",
    r"claimmysocial\.com",
    r"clck\.ru",
    r"cli\.re",
    r"curiouscat\.qa",
    r"cutt\.ly",
    r"discord\.com/invite",
    r"discord\.gg/",
    r"dub\.sh",
    r"etmysocial\.me",
    r"feedlink\.io",
    r"flow\.page",
    r"getmysocial\.click",
    r"getmysocial\.com",
    r"getmysocial\.ink",
    r"getmysocial\.net",
    r"getmysociale\.com",
    r"getmysocials\.me",
    r"getmysocials\.net",
    r"gg\.gg",
    r"gmscl\.com",
    r"gmysocial\.com",
    r"goo\.by",
    r"goo\.gl/",
    r"heyl\.ink",
    r"hypel\.ink",
    r"is\.gd/",
    r"joy\.link",
    r"justallmy\.link",
    r"line\.me",
    r"linktr\.ee",
    r"lit\.link",
    r"lnk\.to",
    r"mybios\.io",
    r"ngl\.link",
    r"onlysites\.co",
    r"ow\.ly/",
    r"rb\.gy",
    r"rebrand\.ly",
    r"s\.id",
    r"shor\.by",
    r"shorte\.st",
    r"shorturl\.at",
    r"short\.gy",
    r"signal\.group",
    r"sleek\.bio",
    r"snapchat\.com/add",
    r"snip\.ly",
    r"solo\.to",
    r"start\.page",
    r"t\.ly/",
    r"tapfor\.social",
    r"tapforallmylinks\.com",
    r"tapformy\.social",
    r"tellonym\.me",
    r"thisismy\.social",
    r"tiny\.cc",
    r"tinyurl\.com",
    r"touchmy\.social",
    r"unlockmysocial\.com",
    r"url\.bio",
    r"v\.gd",
    r"wa\.link",
    r"wlo\.link",
    r"znap\.link",
]

# =============================================================================
# SAFE DOMAINS (allowlist, matched by substring)
# =============================================================================

SAFE_DOMAINS: List[str] = [
    "bandcamp.com",
    "buymeacoffee.com",
    "facebook.com",
    "github.com",
    "instagram.com",
    "ko-fi.com",
    "linkedin.com",
    "medium.com",
    "patreon.com",
    "reddit.com",
    "soundcloud.com",
    "spotify.com",
    "substack.com",
    "tiktok.com",
    "twitch.tv",
    "twitter.com",
    "x.com",
    "youtu.be",
    "youtube.com",
]
