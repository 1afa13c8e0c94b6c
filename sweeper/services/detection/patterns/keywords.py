"""
Sweeper Keyword Weight Table

Phrase -> weight. Phrases are matched whole-word and case-insensitively;
every occurrence adds the weight once. Higher weight = more likely spam.
"""

from typing import Dict

SPAM_KEYWORD_WEIGHTS: Dict[str, int] = {
    # Crypto / investment
    "crypto": 3,
    "bitcoin": 2,
    "ethereum": 2,
    "trading": 3,
    "investment": 3,
    "invest": 3,
    "profit": 3,

    "guaranteed": 4,
    "passive income": 4,
    "financial freedom": 3,
    "forex": 4,
    "binary options": 5,
    "nft drop": 3,
    "airdrop": 3,
    "giveaway": 2,
    "free money": 5,
    "double your": 5,

    # Pig butchering, long-con investment
    "liquidity": 3,
    "passive returns": 4,
    "portfolio manager": 3,
    "signal group": 4,
    "insider trade": 4,
    "mentorship": 3,
    "wealth creation": 3,
    "seed phrase": 5,
    "connect wallet": 5,
    "gas fee": 3,
    "reimbursement": 3,

    # Urgency, pressure
    "urgent": 3,
    "act now": 4,
    "limited time": 3,
    "don't miss": 2,
    "last chance": 3,
    "hurry": 2,
    "expires": 2,

    # Scam phrasing
    "kindly": 3,  # very common in scams
    "dear friend": 4,
    "dear sir": 3,
    "dear madam": 3,
    "congratulations": 2,
    "you have been selected": 5,
    "you have won": 5,
    "claim your": 4,
    "verify your account": 4,
    "suspended": 3,

    # Off-platform redirects
    "whatsapp": 5,
    "telegram": 5,
    "add me on": 4,
    "message me on": 4,
    "contact me on": 3,
    "text me": 3,
    "dm me on": 3,

    # Romance
    "lonely": 2,
    "looking for love": 3,
    "sugar daddy": 4,
    "sugar mommy": 4,
    "sugar baby": 3,
    "allowance": 2,
    "spoil you": 3,
    "spoiling": 3,
    "verification fee": 5,
    "gas money": 3,
    "hey hun": 3,
    "bored at home": 2,

    # Adult content promotion
    "onlyfans": 4,
    "fansly": 4,
    "link in bio": 2,
    "link in my bio": 3,
    "check my profile": 2,
    "check my pinned": 3,
    "exclusive content": 3,
    "subscribe": 2,
    "sub to me": 3,
    "live show": 4,
    "sexting": 4,
    "private session": 3,
    "top 0%": 3,
    "uncensored": 3,
    "raw photos": 4,
    "raw vids": 4,
    "no panties": 4,
    "completely free": 3,
    "free profile": 3,
    "free trial": 2,
    "free for 24": 4,
    "free just for": 3,
    "free till midnight": 4,
    "cumslut": 5,
    "nude chat": 5,
    "private followers": 3,
    "private page": 3,
    "filthy side": 4,
    "filthy lil": 4,
    "drenched": 3,
    "spreadin": 4,
    "going wild on myself": 5,
    "taboo secrets": 4,
    "curvy body": 2,
    "perky boobs": 4,
    "tight pussy": 5,
    "tight holes": 5,
    "playing with my": 3,
    "using my toy": 4,
    "between my legs": 4,
    "bent over": 3,
    "ass up": 4,
    "bustin hard": 4,
    "make you throb": 5,
    "dripping": 3,
    "gushing": 3,
    "slippery": 3,
    "instantly wet": 4,
    "bimbo mode": 4,

    # Engagement bait openers
    "are you busy": 2,
    "special question": 3,
    "hope this message meets you well": 4,
    "friendly stranger": 3,
    "don't be shy": 2,
    "tell me something": 2,
    "temptation": 2,
    "nervous typing this": 3,
    "can't wait to see your name": 4,
    "finally sees": 2,
    "i hope this finds you well": 3,
    "can i ask you something": 2,
    "can i ask u something": 2,
    "is it fine if i ask": 2,
    "quick question but be honest": 3,
    "random but u seem": 3,
    "this is random but": 2,
    "hey random but": 2,
    "real quick": 2,
    "be honest would u": 3,
    "you seem familiar": 2,
    "do we know each other": 2,
    "i noticed you": 2,
    "spotted your comment": 3,
    "noticed your comment": 3,
    "saw your comment": 2,
    "saw ur comment": 2,
    "ur comment": 2,
    "your comment turned me": 4,
    "couldn't help but spot": 3,
    "you look cute": 2,
    "you looked cute": 2,
    "u look like the sorta": 3,
    "you seem like my type": 3,
    "you give energy": 2,
    "this might sound weird": 2,
    "okay confession": 3,
    "new here": 2,
    "not very active here": 3,
    "reaching out from a backup": 4,

    # FOMO
    "till midnight": 4,
    "until midnight": 4,
    "limited verification": 4,
    "free verification phase": 5,
    "direct path to": 3,
    "your access is waiting": 4,
    "begin free now": 4,
    "join for free": 2,
    "your likes": 2,
    "makes me throb": 5,

    # Stock pump schemes
    "stock blogger": 5,
    "reliable stock": 4,
    "market analysis team": 5,
    "stocks buying and selling": 5,
    "trade setups": 4,
    "stock list": 3,
    "high-conviction": 4,
    "crypto signals": 4,
    "stock signals": 4,
    "returns is now live": 5,
    "transform potential into profit": 5,
    "never recommends junk": 4,
    "valuable investing": 3,
    "exclusive investment": 4,
    "exclusive report": 3,
    "way better than researching": 4,

    # Fake intimacy hooks
    "hey cutie": 2,
    "hey handsome": 2,
    "hey gorgeous": 2,
    "hey love": 2,
    "hey babe": 2,
    "hello handsome": 2,
    "hello gorgeous": 2,
    "hi cutie": 2,
    "thinking of you": 2,
    "imagining you": 3,
    "craving": 2,
    "needy": 2,
    "desperate for touch": 4,
    "sensitive and needy": 3,
    "hot and bothered": 3,
    "playing with myself": 4,
    "touching myself": 4,
    "one click away": 3,
    "come prove me right": 3,
    "come get what you do": 3,
    "come sub now": 4,
    "come see": 2,
    "door wide open": 3,
    "i'll take the lead": 2,
    "tap the link": 2,
    "hit the link": 2,
    "click when you want": 3,
    "press the picture": 3,
    "hit my pic": 3,

    # Explicit solicitation
    "dm me 1 word": 4,
    "dm me on of": 4,
    "slide into": 2,
    "invaded your dms": 4,
    "obey me": 3,
    "slave": 3,
    "dominance": 2,
    "behave or misbehave": 3,
    "quit staring": 3,
    "stop behaving": 3,
    "deserve it": 2,
    "nasty you'll be addicted": 5,
    "welcome video": 3,
    "full reveal": 3,
    "real treat": 2,
    "unwrap the rest": 3,
    "what i'm hiding": 3,

    # Teasers
    "i need to tell you something": 2,
    "it will be short": 2,
    "this shot is merely": 3,
    "the photo cuts off": 3,
    "kept the rest uncensored": 4,
    "didn't show here": 2,
    "you got this far": 2,
    "don't dare stop": 3,
    "still here still soft": 3,

    # Overused marketing buzzwords
    "game-changer": 3,
    "game changer": 3,
    "the real unlock": 3,
    "unlock the power": 3,
    "scaling to the moon": 3,

    # Crypto, 2024-2025 wave
    "mining pool": 4,
    "liquidity pool": 3,
    "staking rewards": 3,
    "new ico": 4,
    "pump and dump": 5,
    "risk-free": 4,
    "recovery phrase": 5,
    "private key": 5,
    "send me 1 eth": 5,
    "send me 1 btc": 5,
    "verify your wallet": 4,
    "security alert": 3,

    # Romance, 2024-2025 wave
    "working overseas": 3,
    "in the military": 3,
    "oil rig": 4,
    "bad internet": 3,
    "recently widowed": 3,
    "medical emergency": 4,
    "customs fees": 4,
    "shipping fees": 3,
    "never felt this way": 3,
    "soulmate": 2,

    # Meetup scams
    "paid meetup": 4,
    "meetup available": 3,
    "gf experience": 4,
    "girlfriend experience": 4,
    "booking info": 2,  # "agency" accounts
}
