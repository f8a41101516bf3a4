"""
Analysis configuration - correlation topics, narrative patterns, people,
source tiers and sentiment indicators.

Every table here is read-only: analyzers hold references to these objects
and never mutate them.
"""

import re
from dataclasses import dataclass, field
from typing import Literal

NarrativeSeverity = Literal["watch", "emerging", "spreading", "disinfo"]

PersonRole = Literal[
    "political",
    "tech",
    "finance",
    "military",
    "media",
    "central_bank",
    "international",
    "other",
]

PERSON_ROLES: tuple[str, ...] = (
    "political",
    "tech",
    "finance",
    "military",
    "media",
    "central_bank",
    "international",
    "other",
)


def compile_patterns(*patterns: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


@dataclass(frozen=True)
class CorrelationTopic:
    """Topic definition with compiled regex patterns."""

    id: str
    patterns: tuple[re.Pattern, ...]
    category: str
    weight: int = 1
    predictive_indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class NarrativePattern:
    """Narrative definition matched by plain keywords."""

    id: str
    keywords: tuple[str, ...]
    category: str
    severity: NarrativeSeverity
    amplification_phrases: tuple[str, ...] = ()
    debunk_indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class PersonPattern:
    """Tracked person; a single pattern covers all aliases."""

    name: str
    pattern: re.Pattern
    role: PersonRole
    aliases: tuple[str, ...] = ()
    titles: tuple[str, ...] = ()


@dataclass(frozen=True)
class SourceTypes:
    """Lowercase substrings identifying each source tier."""

    fringe: tuple[str, ...] = ()
    alternative: tuple[str, ...] = ()
    mainstream: tuple[str, ...] = ()
    institutional: tuple[str, ...] = ()
    aggregator: tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentIndicators:
    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()
    neutral: tuple[str, ...] = ()


def _person(
    name: str,
    pattern: str,
    role: PersonRole,
    aliases: tuple[str, ...] = (),
    titles: tuple[str, ...] = (),
) -> PersonPattern:
    return PersonPattern(
        name=name,
        pattern=re.compile(pattern, re.IGNORECASE),
        role=role,
        aliases=aliases,
        titles=titles,
    )


# ============================================================================
# Correlation topics
# ============================================================================

CORRELATION_TOPICS: tuple[CorrelationTopic, ...] = (
    # Economy & Finance
    CorrelationTopic(
        id="tariffs",
        patterns=compile_patterns(
            r"tariff",
            r"trade war",
            r"import tax",
            r"customs duty",
            r"trade barrier",
            r"trade deficit",
            r"trade deal",
            r"trade negotiation",
        ),
        category="Economy",
        weight=3,
        predictive_indicators=(
            "expected to",
            "planning",
            "considering",
            "may impose",
            "threatens to",
        ),
    ),
    CorrelationTopic(
        id="fed-rates",
        patterns=compile_patterns(
            r"federal reserve",
            r"interest rate",
            r"rate cut",
            r"rate hike",
            r"powell",
            r"fomc",
            r"fed meeting",
            r"monetary policy",
            r"rate decision",
            r"basis point",
        ),
        category="Economy",
        weight=4,
        predictive_indicators=("expected", "forecast", "likely", "anticipate", "signal"),
    ),
    CorrelationTopic(
        id="inflation",
        patterns=compile_patterns(
            r"inflation",
            r"cpi\b",
            r"consumer price",
            r"cost of living",
            r"pce\b",
            r"price index",
            r"deflation",
            r"stagflation",
        ),
        category="Economy",
        weight=3,
        predictive_indicators=("rising", "falling", "accelerating", "cooling"),
    ),
    CorrelationTopic(
        id="recession",
        patterns=compile_patterns(
            r"recession",
            r"economic downturn",
            r"gdp.*contract",
            r"economic slowdown",
            r"hard landing",
            r"soft landing",
            r"yield curve.*invert",
        ),
        category="Economy",
        weight=4,
        predictive_indicators=("warning", "risk", "fears", "imminent", "averted"),
    ),
    CorrelationTopic(
        id="housing",
        patterns=compile_patterns(
            r"housing market",
            r"mortgage rate",
            r"home price",
            r"real estate.*crash",
            r"housing bubble",
            r"home sales",
            r"housing starts",
            r"foreclosure",
        ),
        category="Economy",
        weight=2,
        predictive_indicators=("plunge", "soar", "crash", "recovery"),
    ),
    CorrelationTopic(
        id="layoffs",
        patterns=compile_patterns(
            r"layoff",
            r"job cut",
            r"workforce reduction",
            r"downsizing",
            r"restructuring",
            r"headcount",
            r"severance",
            r"\brif\b",
            r"furlough",
        ),
        category="Business",
        weight=2,
        predictive_indicators=("announces", "planning", "expected", "imminent"),
    ),
    CorrelationTopic(
        id="bank-crisis",
        patterns=compile_patterns(
            r"bank.*fail",
            r"banking crisis",
            r"fdic",
            r"bank run",
            r"bank collapse",
            r"liquidity crisis",
            r"bank stress",
            r"deposit flight",
        ),
        category="Finance",
        weight=5,
        predictive_indicators=("contagion", "spreading", "fears", "risk"),
    ),
    CorrelationTopic(
        id="crypto",
        patterns=compile_patterns(
            r"bitcoin",
            r"crypto.*regulation",
            r"ethereum",
            r"sec.*crypto",
            r"crypto crash",
            r"stablecoin",
            r"defi\b",
            r"crypto exchange",
            r"\bbtc\b",
            r"\beth\b",
        ),
        category="Finance",
        weight=2,
        predictive_indicators=("rally", "crash", "surge", "plunge", "breakout"),
    ),
    CorrelationTopic(
        id="supply-chain",
        patterns=compile_patterns(
            r"supply chain",
            r"shipping.*delay",
            r"port.*congestion",
            r"logistics.*crisis",
            r"container shortage",
            r"freight",
            r"backlog",
            r"shortage",
        ),
        category="Economy",
        weight=3,
        predictive_indicators=("disruption", "crisis", "bottleneck", "improving"),
    ),
    CorrelationTopic(
        id="debt-ceiling",
        patterns=compile_patterns(
            r"debt ceiling",
            r"debt limit",
            r"government shutdown",
            r"default.*treasury",
            r"x-date",
            r"extraordinary measures",
        ),
        category="Economy",
        weight=5,
        predictive_indicators=("deadline", "crisis", "breach", "deal"),
    ),
    # Tech
    CorrelationTopic(
        id="ai-regulation",
        patterns=compile_patterns(
            r"ai regulation",
            r"artificial intelligence.*law",
            r"ai safety",
            r"ai governance",
            r"ai policy",
            r"\bai act\b",
            r"\bai bill\b",
            r"regulate ai",
        ),
        category="Tech",
        weight=3,
        predictive_indicators=("proposed", "draft", "passed", "enacted"),
    ),
    CorrelationTopic(
        id="ai-advancement",
        patterns=compile_patterns(
            r"ai breakthrough",
            r"gpt-?\d",
            r"claude\s*\d",
            r"\bllm\b",
            r"large language model",
            r"generative ai",
            r"frontier model",
            r"\bagi\b",
        ),
        category="Tech",
        weight=2,
        predictive_indicators=("release", "launch", "announce", "breakthrough"),
    ),
    CorrelationTopic(
        id="big-tech",
        patterns=compile_patterns(
            r"antitrust.*tech",
            r"google.*monopoly",
            r"meta.*lawsuit",
            r"apple.*doj",
            r"tech.*breakup",
            r"big tech.*regulation",
            r"faang",
        ),
        category="Tech",
        weight=3,
        predictive_indicators=("lawsuit", "ruling", "settlement", "investigation"),
    ),
    CorrelationTopic(
        id="deepfake",
        patterns=compile_patterns(
            r"deepfake",
            r"ai.*misinformation",
            r"synthetic media",
            r"ai-generated.*fake",
            r"voice clone",
            r"face swap",
        ),
        category="Tech",
        weight=2,
        predictive_indicators=("viral", "spreading", "detected", "exposed"),
    ),
    CorrelationTopic(
        id="cyber-attack",
        patterns=compile_patterns(
            r"cyber ?attack",
            r"ransomware",
            r"data breach",
            r"hack.*million",
            r"cyber.*infrastructure",
            r"state-sponsored.*hack",
            r"zero-day",
        ),
        category="Tech",
        weight=4,
        predictive_indicators=("compromised", "breached", "targeted", "ongoing"),
    ),
    # Geopolitics & Conflict
    CorrelationTopic(
        id="china-tensions",
        patterns=compile_patterns(
            r"china.*taiwan",
            r"south china sea",
            r"\bus\b.*china",
            r"beijing.*washington",
            r"taiwan strait",
            r"chip war",
            r"tech war.*china",
            r"decoupling.*china",
        ),
        category="Geopolitics",
        weight=4,
        predictive_indicators=("escalation", "tensions", "military", "sanctions"),
    ),
    CorrelationTopic(
        id="russia-ukraine",
        patterns=compile_patterns(
            r"ukrain",
            r"zelensky",
            r"putin.*war",
            r"crimea",
            r"donbas",
            r"kharkiv",
            r"counteroffensive",
            r"wagner",
        ),
        category="Conflict",
        weight=4,
        predictive_indicators=("offensive", "advance", "retreat", "peace", "ceasefire"),
    ),
    CorrelationTopic(
        id="israel-gaza",
        patterns=compile_patterns(
            r"gaza",
            r"hamas",
            r"netanyahu",
            r"israel.*attack",
            r"hostage",
            r"\bidf\b",
            r"hezbollah",
            r"west bank",
            r"rafah",
        ),
        category="Conflict",
        weight=4,
        predictive_indicators=("ceasefire", "invasion", "escalation", "casualties"),
    ),
    CorrelationTopic(
        id="iran",
        patterns=compile_patterns(
            r"iran.*nuclear",
            r"tehran",
            r"ayatollah",
            r"iranian.*strike",
            r"iran.*israel",
            r"\birgc\b",
            r"houthi",
            r"red sea.*attack",
            r"iranian proxy",
        ),
        category="Geopolitics",
        weight=4,
        predictive_indicators=("enrichment", "strike", "retaliation", "tensions"),
    ),
    CorrelationTopic(
        id="north-korea",
        patterns=compile_patterns(
            r"north korea",
            r"kim jong",
            r"pyongyang",
            r"\bdprk\b",
            r"icbm.*korea",
            r"nuclear.*korea",
            r"korean peninsula",
        ),
        category="Geopolitics",
        weight=3,
        predictive_indicators=("missile", "test", "provocation", "sanctions"),
    ),
    CorrelationTopic(
        id="nuclear",
        patterns=compile_patterns(
            r"nuclear.*threat",
            r"nuclear weapon",
            r"atomic",
            r"\bicbm",
            r"nuclear war",
            r"nuclear deterrent",
            r"nuclear posture",
        ),
        category="Security",
        weight=5,
        predictive_indicators=("threat", "warning", "alert", "deployment"),
    ),
    CorrelationTopic(
        id="military-deployment",
        patterns=compile_patterns(
            r"troop.*deploy",
            r"military.*deploy",
            r"naval.*fleet",
            r"carrier group",
            r"military buildup",
            r"defense.*alert",
        ),
        category="Security",
        weight=4,
        predictive_indicators=("mobilization", "deployment", "positioned", "alert"),
    ),
    CorrelationTopic(
        id="sanctions",
        patterns=compile_patterns(
            r"sanction",
            r"economic.*restriction",
            r"asset freeze",
            r"trade.*restriction",
            r"embargo",
            r"export control",
        ),
        category="Geopolitics",
        weight=3,
        predictive_indicators=("imposed", "expanded", "lifted", "violated"),
    ),
    # Politics
    CorrelationTopic(
        id="election",
        patterns=compile_patterns(
            r"election",
            r"polling",
            r"campaign",
            r"ballot",
            r"voter",
            r"swing state",
            r"electoral",
            r"primar(?:y|ies)",
            r"caucus",
        ),
        category="Politics",
        weight=3,
        predictive_indicators=("projected", "forecast", "leads", "outcome"),
    ),
    CorrelationTopic(
        id="immigration",
        patterns=compile_patterns(
            r"immigration",
            r"border.*crisis",
            r"migrant",
            r"deportation",
            r"asylum",
            r"sanctuary",
            r"undocumented",
            r"\bvisa",
        ),
        category="Politics",
        weight=2,
        predictive_indicators=("surge", "crackdown", "policy", "reform"),
    ),
    CorrelationTopic(
        id="impeachment",
        patterns=compile_patterns(
            r"impeach",
            r"articles of impeachment",
            r"congressional investigation",
            r"high crimes",
        ),
        category="Politics",
        weight=4,
        predictive_indicators=("vote", "inquiry", "charges", "trial"),
    ),
    # Health & Environment
    CorrelationTopic(
        id="pandemic",
        patterns=compile_patterns(
            r"pandemic",
            r"outbreak",
            r"virus.*spread",
            r"\bwho\b.*emergency",
            r"bird flu",
            r"h5n1",
            r"epidemic",
            r"novel virus",
            r"pathogen",
        ),
        category="Health",
        weight=4,
        predictive_indicators=("outbreak", "spreading", "cases", "emergency"),
    ),
    CorrelationTopic(
        id="climate",
        patterns=compile_patterns(
            r"climate change",
            r"wildfire",
            r"hurricane",
            r"extreme weather",
            r"flood",
            r"heat ?wave",
            r"drought",
            r"climate emergency",
            r"carbon emission",
        ),
        category="Environment",
        weight=2,
        predictive_indicators=("warning", "record", "catastrophic", "unprecedented"),
    ),
    # Commodities
    CorrelationTopic(
        id="oil-energy",
        patterns=compile_patterns(
            r"oil price",
            r"opec",
            r"crude oil",
            r"energy crisis",
            r"natural gas",
            r"\blng\b",
            r"petroleum",
            r"oil supply",
        ),
        category="Economy",
        weight=3,
        predictive_indicators=("surge", "cut", "production", "demand"),
    ),
    CorrelationTopic(
        id="gold-commodities",
        patterns=compile_patterns(
            r"gold price",
            r"precious metal",
            r"gold rally",
            r"safe haven",
            r"commodit(?:y|ies).*surge",
            r"silver price",
        ),
        category="Finance",
        weight=2,
        predictive_indicators=("rally", "flight to", "record", "demand"),
    ),
)


# ============================================================================
# Narrative patterns
# ============================================================================

NARRATIVE_PATTERNS: tuple[NarrativePattern, ...] = (
    # Political
    NarrativePattern(
        id="deep-state",
        keywords=(
            "deep state",
            "shadow government",
            "permanent state",
            "bureaucracy corruption",
            "unelected officials",
            "administrative state",
            "entrenched bureaucrats",
        ),
        category="Political",
        severity="watch",
        amplification_phrases=("exposed", "revealed", "uncovered", "proof"),
        debunk_indicators=(
            "conspiracy theory",
            "debunked",
            "false claim",
            "no evidence",
        ),
    ),
    NarrativePattern(
        id="wef-agenda",
        keywords=(
            "great reset",
            "world economic forum",
            "davos",
            "stakeholder capitalism",
            "global governance",
            "you will own nothing",
            "agenda 2030",
        ),
        category="Political",
        severity="watch",
        amplification_phrases=("plan", "agenda", "secret", "revealed"),
        debunk_indicators=("misrepresented", "out of context", "conspiracy"),
    ),
    NarrativePattern(
        id="election-integrity",
        keywords=(
            "election fraud",
            "rigged election",
            "stolen election",
            "voter fraud",
            "election interference",
            "voting machine",
            "ballot harvesting",
            "mail-in fraud",
            "dead voters",
        ),
        category="Political",
        severity="watch",
        amplification_phrases=("evidence", "proof", "whistleblower", "exposed"),
        debunk_indicators=(
            "debunked",
            "no evidence",
            "baseless",
            "false claims",
            "fact check",
        ),
    ),
    NarrativePattern(
        id="government-overreach",
        keywords=(
            "tyranny",
            "authoritarian",
            "government control",
            "police state",
            "martial law",
            "civil liberties",
            "constitutional violation",
        ),
        category="Political",
        severity="watch",
        amplification_phrases=("unprecedented", "alarming", "dangerous"),
        debunk_indicators=("exaggerated", "misleading", "context"),
    ),
    # Finance & Economy
    NarrativePattern(
        id="cbdc-control",
        keywords=(
            "cbdc",
            "central bank digital",
            "digital dollar",
            "digital euro",
            "digital yuan",
            "programmable money",
            "social credit",
            "financial surveillance",
        ),
        category="Finance",
        severity="watch",
        amplification_phrases=("control", "track", "surveillance", "restrict"),
        debunk_indicators=("privacy features", "voluntary", "misconception"),
    ),
    NarrativePattern(
        id="dollar-decline",
        keywords=(
            "dollar collapse",
            "dedollarization",
            "brics currency",
            "petrodollar",
            "dollar reserve",
            "us debt",
            "dollar hegemony",
            "yuan replacing",
        ),
        category="Finance",
        severity="spreading",
        amplification_phrases=(
            "imminent",
            "accelerating",
            "inevitable",
            "historic shift",
        ),
        debunk_indicators=("overstated", "unlikely", "still dominant", "premature"),
    ),
    NarrativePattern(
        id="bank-instability",
        keywords=(
            "bank failure",
            "bank run",
            "banking crisis",
            "bank collapse",
            "financial crisis",
            "credit crunch",
            "systemic risk",
            "contagion",
        ),
        category="Finance",
        severity="watch",
        amplification_phrases=("spreading", "next", "imminent", "panic"),
        debunk_indicators=("contained", "isolated", "backstop", "stable"),
    ),
    NarrativePattern(
        id="inflation-spiral",
        keywords=(
            "hyperinflation",
            "inflation spiral",
            "currency debasement",
            "money printing",
            "fiat collapse",
            "purchasing power",
        ),
        category="Finance",
        severity="emerging",
        amplification_phrases=("soaring", "out of control", "crisis"),
        debunk_indicators=("stabilizing", "cooling", "transitory", "peaked"),
    ),
    # Health
    NarrativePattern(
        id="bio-weapon",
        keywords=(
            "lab leak",
            "bioweapon",
            "gain of function",
            "wuhan lab",
            "virus origin",
            "lab origin",
            "engineered virus",
            "bio-lab",
        ),
        category="Health",
        severity="emerging",
        amplification_phrases=("evidence", "investigation", "covered up", "leaked"),
        debunk_indicators=("natural origin", "no evidence", "debunked", "speculation"),
    ),
    NarrativePattern(
        id="vaccine-concerns",
        keywords=(
            "vaccine injury",
            "vaccine side effect",
            "vaccine mandate",
            "vaccine hesitancy",
            "mrna concern",
            "vaccine deaths",
            "adverse event",
            "vaers",
        ),
        category="Health",
        severity="watch",
        amplification_phrases=("covered up", "hidden", "suppressed", "exposed"),
        debunk_indicators=("rare", "safe", "effective", "misinformation", "anti-vax"),
    ),
    NarrativePattern(
        id="pandemic-threat",
        keywords=(
            "next pandemic",
            "disease x",
            "bird flu",
            "h5n1",
            "new virus",
            "outbreak",
            "epidemic",
            "pandemic preparedness",
            "novel pathogen",
        ),
        category="Health",
        severity="emerging",
        amplification_phrases=("warning", "experts fear", "preparing", "imminent"),
        debunk_indicators=("low risk", "contained", "monitoring", "precautionary"),
    ),
    NarrativePattern(
        id="health-freedom",
        keywords=(
            "medical freedom",
            "health freedom",
            "bodily autonomy",
            "informed consent",
            "medical tyranny",
            "forced treatment",
        ),
        category="Health",
        severity="watch",
        amplification_phrases=("rights", "freedom", "choice"),
        debunk_indicators=("public health", "community protection", "science-based"),
    ),
    # Tech & AI
    NarrativePattern(
        id="ai-risk",
        keywords=(
            "ai risk",
            "ai danger",
            "ai threat",
            "ai doom",
            "ai extinction",
            "superintelligence",
            "agi",
            "existential risk",
            "ai takeover",
            "ai apocalypse",
        ),
        category="Tech",
        severity="emerging",
        amplification_phrases=("warning", "experts fear", "imminent", "unstoppable"),
        debunk_indicators=("overhyped", "far off", "speculation", "science fiction"),
    ),
    NarrativePattern(
        id="ai-consciousness",
        keywords=(
            "ai sentient",
            "ai conscious",
            "ai feelings",
            "ai alive",
            "machine consciousness",
            "ai soul",
            "ai awareness",
        ),
        category="Tech",
        severity="emerging",
        amplification_phrases=("breakthrough", "achieved", "evidence"),
        debunk_indicators=("simulation", "illusion", "not conscious", "mimicking"),
    ),
    NarrativePattern(
        id="job-automation",
        keywords=(
            "robots replacing",
            "automation",
            "job loss ai",
            "ai replacing",
            "workers displaced",
            "unemployment ai",
            "jobless future",
            "ai layoffs",
        ),
        category="Economy",
        severity="spreading",
        amplification_phrases=("wave", "mass", "millions", "inevitable"),
        debunk_indicators=("new jobs", "augment", "assist", "overstated"),
    ),
    NarrativePattern(
        id="surveillance",
        keywords=(
            "surveillance",
            "privacy",
            "spying",
            "mass surveillance",
            "data collection",
            "tracking",
            "facial recognition",
            "social credit",
        ),
        category="Society",
        severity="watch",
        amplification_phrases=("orwellian", "big brother", "dystopian", "totalitarian"),
        debunk_indicators=("security", "safety", "opt-out", "regulations"),
    ),
    # Geopolitical
    NarrativePattern(
        id="china-threat",
        keywords=(
            "china threat",
            "taiwan invasion",
            "china war",
            "south china sea",
            "chinese military",
            "china aggression",
            "chinese spy",
            "ccp threat",
            "chinese infiltration",
        ),
        category="Geopolitical",
        severity="watch",
        amplification_phrases=("imminent", "preparing", "buildup", "warning"),
        debunk_indicators=("diplomacy", "deterrence", "overstated", "rhetoric"),
    ),
    NarrativePattern(
        id="nato-russia",
        keywords=(
            "nato expansion",
            "nato provocation",
            "russia nato",
            "nato aggression",
            "nuclear threat",
            "world war",
            "russian aggression",
            "nato article 5",
        ),
        category="Geopolitical",
        severity="watch",
        amplification_phrases=("escalation", "brink", "threat", "provocation"),
        debunk_indicators=("defensive", "deterrence", "rhetoric", "unlikely"),
    ),
    NarrativePattern(
        id="world-war",
        keywords=(
            "world war 3",
            "ww3",
            "global conflict",
            "great power war",
            "nuclear war",
            "world war iii",
        ),
        category="Geopolitical",
        severity="watch",
        amplification_phrases=("imminent", "inevitable", "brink", "escalating"),
        debunk_indicators=("unlikely", "deterrence", "diplomacy", "hyperbole"),
    ),
    # Society & Environment
    NarrativePattern(
        id="population-crisis",
        keywords=(
            "fertility crisis",
            "birth rate",
            "population decline",
            "demographic crisis",
            "aging population",
            "population collapse",
            "depopulation",
        ),
        category="Society",
        severity="watch",
        amplification_phrases=("crisis", "collapse", "unsustainable", "alarming"),
        debunk_indicators=("stabilizing", "adaptation", "immigration", "technology"),
    ),
    NarrativePattern(
        id="food-security",
        keywords=(
            "food shortage",
            "food crisis",
            "famine",
            "food supply",
            "crop failure",
            "food price",
            "hunger",
            "food insecurity",
            "fertilizer shortage",
        ),
        category="Economy",
        severity="emerging",
        amplification_phrases=("imminent", "millions", "crisis", "catastrophic"),
        debunk_indicators=("localized", "recovery", "aid", "improving"),
    ),
    NarrativePattern(
        id="energy-crisis",
        keywords=(
            "energy crisis",
            "power grid",
            "blackout",
            "energy shortage",
            "fuel shortage",
            "oil crisis",
            "gas crisis",
            "grid collapse",
            "energy emergency",
        ),
        category="Economy",
        severity="spreading",
        amplification_phrases=("collapse", "emergency", "crisis", "shortage"),
        debunk_indicators=("reserves", "stable", "manageable", "temporary"),
    ),
    NarrativePattern(
        id="climate-alarmism",
        keywords=(
            "climate emergency",
            "climate crisis",
            "climate catastrophe",
            "extinction",
            "climate doom",
            "uninhabitable",
            "point of no return",
        ),
        category="Environment",
        severity="spreading",
        amplification_phrases=(
            "tipping point",
            "irreversible",
            "extinction",
            "catastrophic",
        ),
        debunk_indicators=("adaptation", "progress", "technology", "overstated"),
    ),
    NarrativePattern(
        id="misinformation",
        keywords=(
            "misinformation",
            "disinformation",
            "fake news",
            "propaganda",
            "fact check",
            "censorship",
            "information war",
            "psyop",
        ),
        category="Society",
        severity="spreading",
        amplification_phrases=("spreading", "viral", "dangerous", "coordinated"),
        debunk_indicators=("verified", "confirmed", "accurate", "context"),
    ),
    # Security
    NarrativePattern(
        id="cyber-threat",
        keywords=(
            "cyber attack",
            "hacking",
            "ransomware",
            "data breach",
            "cyber warfare",
            "critical infrastructure",
            "cyber war",
            "nation state hack",
        ),
        category="Security",
        severity="emerging",
        amplification_phrases=("sophisticated", "unprecedented", "massive", "critical"),
        debunk_indicators=("contained", "patched", "isolated", "prevented"),
    ),
    NarrativePattern(
        id="emp-grid",
        keywords=(
            "emp attack",
            "grid attack",
            "infrastructure attack",
            "power grid attack",
            "electromagnetic pulse",
            "grid down",
        ),
        category="Security",
        severity="watch",
        amplification_phrases=("vulnerable", "imminent", "catastrophic"),
        debunk_indicators=("unlikely", "protected", "resilient", "hardened"),
    ),
    NarrativePattern(
        id="terrorism",
        keywords=(
            "terrorist attack",
            "terror threat",
            "extremism",
            "radicalization",
            "domestic terrorism",
            "terror cell",
        ),
        category="Security",
        severity="watch",
        amplification_phrases=("imminent", "credible threat", "elevated", "warning"),
        debunk_indicators=("thwarted", "no credible", "precautionary", "monitoring"),
    ),
)


# ============================================================================
# Source tiers
# ============================================================================

SOURCE_TYPES = SourceTypes(
    fringe=(
        "zerohedge",
        "infowars",
        "naturalnews",
        "gateway pundit",
        "gatewaypundit",
        "breitbart",
        "epoch times",
        "epochtimes",
        "revolver",
        "dailycaller",
        "oann",
        "newsmax",
        "dailywire",
        "blaze",
        "federalist",
        "nationalfile",
    ),
    alternative=(
        "substack",
        "rumble",
        "bitchute",
        "telegram",
        "gab",
        "gettr",
        "truth social",
        "locals",
        "odysee",
        "brighteon",
        "minds",
        "parler",
        "podcast",
        "newsletter",
    ),
    mainstream=(
        "reuters",
        "associated press",
        "ap news",
        "apnews",
        "bbc",
        "cnn",
        "nytimes",
        "new york times",
        "nyt",
        "wsj",
        "wall street journal",
        "wapo",
        "washingtonpost",
        "washington post",
        "guardian",
        "abc news",
        "nbc news",
        "cbs news",
        "fox news",
        "npr",
        "pbs",
        "politico",
        "axios",
        "bloomberg",
        "cnbc",
        "forbes",
        "businessinsider",
        "business insider",
        "techcrunch",
        "theverge",
        "the verge",
        "wired",
        "arstechnica",
        "ars technica",
        "usa today",
        "time",
        "newsweek",
        "la times",
        "los angeles times",
        "chicago tribune",
        "atlantic",
        "new yorker",
        "economist",
        "financial times",
        "ft.com",
        "yahoo news",
        "huffpost",
        "huffington",
        "msnbc",
        "sky news",
        "afp",
        "france24",
        "dw.com",
        "al jazeera",
        "insider",
        "daily beast",
        "vox",
        "vice",
    ),
    institutional=(
        "whitehouse",
        "white house",
        "state.gov",
        "defense.gov",
        "pentagon",
        "treasury.gov",
        "federalreserve",
        "federal reserve",
        "sec.gov",
        "fda.gov",
        "cdc.gov",
        "who.int",
        "un.org",
        "united nations",
        "nato",
        "imf",
        "worldbank",
        "world bank",
        "congress.gov",
        "senate.gov",
        "house.gov",
        "supremecourt",
        "justice.gov",
        "fbi.gov",
        "state department",
        "doj",
        "dhs",
        "government",
        "gov.uk",
        ".gov",
    ),
    aggregator=(
        "google news",
        "news.google",
        "apple news",
        "flipboard",
        "feedly",
        "smartnews",
        "news360",
        "inoreader",
        "reddit",
        "twitter",
        "x.com",
        "facebook",
        "linkedin",
        "drudge",
        "memeorandum",
        "realclear",
        "alltop",
        "newsnow",
        "newsbreak",
        "ground news",
    ),
)


# ============================================================================
# Sentiment indicators
# ============================================================================

SENTIMENT_INDICATORS = SentimentIndicators(
    positive=(
        "praised",
        "celebrated",
        "hailed",
        "lauded",
        "applauded",
        "commended",
        "honored",
        "triumphant",
        "victory",
        "success",
        "achievement",
        "breakthrough",
        "hero",
        "wins",
        "supported by",
        "backed by",
        "endorsed",
        "popular",
        "approval",
        "brilliant",
        "visionary",
        "innovative",
        "transformative",
    ),
    negative=(
        "criticized",
        "condemned",
        "slammed",
        "blasted",
        "attacked",
        "accused",
        "denounced",
        "scandal",
        "controversy",
        "investigation",
        "probe",
        "indicted",
        "charged",
        "sued",
        "failure",
        "disaster",
        "crisis",
        "backlash",
        "outrage",
        "fury",
        "anger",
        "blamed",
        "under fire",
        "troubled",
        "embattled",
        "corrupt",
        "incompetent",
        "disgraced",
        "impeach",
        "resign",
        "fired",
    ),
    neutral=(
        "said",
        "announced",
        "stated",
        "reported",
        "according to",
        "met with",
        "visited",
        "scheduled",
        "plans to",
        "expected to",
        "speaks",
        "addresses",
        "meets",
    ),
)


# ============================================================================
# People
# ============================================================================

PERSON_PATTERNS: tuple[PersonPattern, ...] = (
    # US political figures
    _person(
        "Donald Trump",
        r"\b(?:donald\s+)?trump\b|\bdjt\b",
        "political",
        aliases=("Trump", "DJT", "President Trump"),
        titles=("President",),
    ),
    _person(
        "Joe Biden",
        r"\b(?:joe\s+)?biden\b",
        "political",
        aliases=("Biden", "President Biden"),
        titles=("President", "Former President"),
    ),
    _person(
        "Kamala Harris",
        r"\b(?:kamala\s+)?harris\b",
        "political",
        aliases=("Harris", "VP Harris"),
        titles=("Vice President",),
    ),
    _person(
        "JD Vance",
        r"\b(?:jd\s+)?vance\b",
        "political",
        aliases=("Vance",),
        titles=("Vice President", "Senator"),
    ),
    _person(
        "Nancy Pelosi",
        r"\b(?:nancy\s+)?pelosi\b",
        "political",
        aliases=("Pelosi",),
        titles=("Speaker Emerita",),
    ),
    _person(
        "Mitch McConnell",
        r"\b(?:mitch\s+)?mcconnell\b",
        "political",
        aliases=("McConnell",),
        titles=("Senator",),
    ),
    _person(
        "Mike Johnson",
        r"\bspeaker\s+(?:mike\s+)?johnson\b|\bmike\s+johnson\b",
        "political",
        aliases=("Speaker Johnson",),
        titles=("Speaker",),
    ),
    _person(
        "Ron DeSantis",
        r"\b(?:ron\s+)?desantis\b",
        "political",
        aliases=("DeSantis",),
        titles=("Governor",),
    ),
    _person(
        "Gavin Newsom",
        r"\b(?:gavin\s+)?newsom\b",
        "political",
        aliases=("Newsom",),
        titles=("Governor",),
    ),
    _person(
        "Alexandria Ocasio-Cortez",
        r"\baoc\b|\b(?:alexandria\s+)?ocasio[\s-]*cortez\b",
        "political",
        aliases=("AOC", "Ocasio-Cortez"),
        titles=("Representative",),
    ),
    _person(
        "Bernie Sanders",
        r"\b(?:bernie\s+)?sanders\b",
        "political",
        aliases=("Sanders",),
        titles=("Senator",),
    ),
    _person(
        "Marco Rubio",
        r"\b(?:marco\s+)?rubio\b",
        "political",
        aliases=("Rubio",),
        titles=("Secretary of State", "Senator"),
    ),
    _person(
        "Antony Blinken",
        r"\b(?:antony\s+|tony\s+)?blinken\b",
        "political",
        aliases=("Blinken",),
        titles=("Secretary of State",),
    ),
    _person(
        "Merrick Garland",
        r"\b(?:merrick\s+)?garland\b",
        "political",
        aliases=("Garland", "AG Garland"),
        titles=("Attorney General",),
    ),
    _person(
        "Lloyd Austin",
        r"\blloyd\s+austin\b|\b(?:defense\s+secretary|secdef)\s+austin\b",
        "military",
        aliases=("Secretary Austin",),
        titles=("Secretary of Defense",),
    ),
    _person(
        "Pete Hegseth",
        r"\b(?:pete\s+)?hegseth\b",
        "military",
        aliases=("Hegseth",),
        titles=("Secretary of Defense",),
    ),
    # US finance officials
    _person(
        "Janet Yellen",
        r"\b(?:janet\s+)?yellen\b",
        "finance",
        aliases=("Yellen",),
        titles=("Treasury Secretary",),
    ),
    _person(
        "Scott Bessent",
        r"\b(?:scott\s+)?bessent\b",
        "finance",
        aliases=("Bessent",),
        titles=("Treasury Secretary",),
    ),
    _person(
        "Gary Gensler",
        r"\b(?:gary\s+)?gensler\b",
        "finance",
        aliases=("Gensler",),
        titles=("SEC Chair",),
    ),
    # Central bankers
    _person(
        "Jerome Powell",
        r"\b(?:jerome\s+)?powell\b",
        "central_bank",
        aliases=("Powell", "Fed Chair Powell"),
        titles=("Fed Chair",),
    ),
    _person(
        "Christine Lagarde",
        r"\b(?:christine\s+)?lagarde\b",
        "central_bank",
        aliases=("Lagarde",),
        titles=("ECB President",),
    ),
    _person(
        "Andrew Bailey",
        r"\bandrew\s+bailey\b|\bboe\s+(?:governor\s+)?bailey\b",
        "central_bank",
        aliases=("Bailey",),
        titles=("Bank of England Governor",),
    ),
    _person(
        "Kazuo Ueda",
        r"\b(?:kazuo\s+)?ueda\b",
        "central_bank",
        aliases=("Ueda",),
        titles=("Bank of Japan Governor",),
    ),
    # International organizations
    _person(
        "Antonio Guterres",
        r"\b(?:ant[oó]nio\s+)?guterres\b",
        "international",
        aliases=("Guterres",),
        titles=("UN Secretary-General",),
    ),
    _person(
        "Mark Rutte",
        r"\b(?:mark\s+)?rutte\b",
        "international",
        aliases=("Rutte",),
        titles=("NATO Secretary General",),
    ),
    _person(
        "Kristalina Georgieva",
        r"\b(?:kristalina\s+)?georgieva\b",
        "international",
        aliases=("Georgieva",),
        titles=("IMF Managing Director",),
    ),
    _person(
        "Ursula von der Leyen",
        r"\b(?:ursula\s+)?von\s+der\s+leyen\b",
        "international",
        aliases=("von der Leyen",),
        titles=("European Commission President",),
    ),
    _person(
        "Tedros Adhanom Ghebreyesus",
        r"\btedros\b",
        "international",
        aliases=("Tedros",),
        titles=("WHO Director-General",),
    ),
    # World leaders
    _person(
        "Vladimir Putin",
        r"\b(?:vladimir\s+)?putin\b|\brussian?\s+president\b",
        "political",
        aliases=("Putin", "Russian President"),
        titles=("President",),
    ),
    _person(
        "Volodymyr Zelensky",
        r"\b(?:volodymyr\s+)?zelenskyy?\b|\bukrainian?\s+president\b",
        "political",
        aliases=("Zelensky", "Zelenskyy"),
        titles=("President",),
    ),
    _person(
        "Xi Jinping",
        r"\bxi\s*jinping\b|\bpresident\s+xi\b|\bchinese\s+president\b",
        "political",
        aliases=("Xi", "President Xi"),
        titles=("President", "General Secretary"),
    ),
    _person(
        "Benjamin Netanyahu",
        r"\b(?:benjamin\s+)?netanyahu\b|\bbibi\b",
        "political",
        aliases=("Netanyahu", "Bibi"),
        titles=("Prime Minister",),
    ),
    _person(
        "Kim Jong Un",
        r"\bkim\s*jong[\s-]*un\b",
        "political",
        aliases=("Kim Jong Un",),
        titles=("Supreme Leader",),
    ),
    _person(
        "Recep Tayyip Erdogan",
        r"\b(?:recep\s+tayyip\s+)?erdo[gğ]an\b",
        "political",
        aliases=("Erdogan",),
        titles=("President",),
    ),
    _person(
        "Narendra Modi",
        r"\b(?:narendra\s+)?modi\b",
        "political",
        aliases=("Modi", "PM Modi"),
        titles=("Prime Minister",),
    ),
    _person(
        "Keir Starmer",
        r"\b(?:keir\s+)?starmer\b",
        "political",
        aliases=("Starmer",),
        titles=("Prime Minister",),
    ),
    _person(
        "Emmanuel Macron",
        r"\b(?:emmanuel\s+)?macron\b",
        "political",
        aliases=("Macron",),
        titles=("President",),
    ),
    _person(
        "Olaf Scholz",
        r"\b(?:olaf\s+)?scholz\b",
        "political",
        aliases=("Scholz",),
        titles=("Chancellor",),
    ),
    _person(
        "Friedrich Merz",
        r"\b(?:friedrich\s+)?merz\b",
        "political",
        aliases=("Merz",),
        titles=("Chancellor",),
    ),
    _person(
        "Giorgia Meloni",
        r"\b(?:giorgia\s+)?meloni\b",
        "political",
        aliases=("Meloni",),
        titles=("Prime Minister",),
    ),
    _person(
        "Mohammed bin Salman",
        r"\bmohammed\s+bin\s+salman\b|\bmbs\b|\bsaudi\s+crown\s+prince\b",
        "political",
        aliases=("MBS", "Saudi Crown Prince"),
        titles=("Crown Prince",),
    ),
    _person(
        "Ali Khamenei",
        r"\b(?:ali\s+)?khamenei\b",
        "political",
        aliases=("Khamenei",),
        titles=("Supreme Leader",),
    ),
    _person(
        "Justin Trudeau",
        r"\b(?:justin\s+)?trudeau\b",
        "political",
        aliases=("Trudeau",),
        titles=("Prime Minister",),
    ),
    _person(
        "Mark Carney",
        r"\b(?:mark\s+)?carney\b",
        "political",
        aliases=("Carney",),
        titles=("Prime Minister",),
    ),
    _person(
        "Javier Milei",
        r"\b(?:javier\s+)?milei\b",
        "political",
        aliases=("Milei",),
        titles=("President",),
    ),
    _person(
        "Luiz Inacio Lula da Silva",
        r"\blula\b|\bluiz\s+in[aá]cio\b",
        "political",
        aliases=("Lula",),
        titles=("President",),
    ),
    _person(
        "Shigeru Ishiba",
        r"\b(?:shigeru\s+)?ishiba\b",
        "political",
        aliases=("Ishiba",),
        titles=("Prime Minister",),
    ),
    _person(
        "Claudia Sheinbaum",
        r"\b(?:claudia\s+)?sheinbaum\b",
        "political",
        aliases=("Sheinbaum",),
        titles=("President",),
    ),
    # Tech leaders
    _person(
        "Elon Musk",
        r"\b(?:elon\s+)?musk\b|\belon\b|\btesla\s+ceo\b",
        "tech",
        aliases=("Musk", "Elon", "Tesla CEO"),
        titles=("CEO", "Founder"),
    ),
    _person(
        "Sam Altman",
        r"\b(?:sam\s+)?altman\b|\bopenai\s+ceo\b",
        "tech",
        aliases=("Altman", "OpenAI CEO"),
        titles=("CEO",),
    ),
    _person(
        "Mark Zuckerberg",
        r"\b(?:mark\s+)?zuckerberg\b|\bzuck\b|\bmeta\s+ceo\b",
        "tech",
        aliases=("Zuckerberg", "Zuck", "Meta CEO"),
        titles=("CEO", "Founder"),
    ),
    _person(
        "Jeff Bezos",
        r"\b(?:jeff\s+)?bezos\b",
        "tech",
        aliases=("Bezos",),
        titles=("Founder", "Executive Chairman"),
    ),
    _person(
        "Tim Cook",
        r"\btim\s+cook\b|\bapple\s+ceo\b",
        "tech",
        aliases=("Tim Cook", "Apple CEO"),
        titles=("CEO",),
    ),
    _person(
        "Satya Nadella",
        r"\b(?:satya\s+)?nadella\b|\bmicrosoft\s+ceo\b",
        "tech",
        aliases=("Nadella", "Microsoft CEO"),
        titles=("CEO",),
    ),
    _person(
        "Sundar Pichai",
        r"\b(?:sundar\s+)?pichai\b|\b(?:google|alphabet)\s+ceo\b",
        "tech",
        aliases=("Pichai", "Google CEO"),
        titles=("CEO",),
    ),
    _person(
        "Jensen Huang",
        r"\bjensen\s+huang\b|\bjensen\b|\bnvidia\s+ceo\b",
        "tech",
        aliases=("Jensen", "NVIDIA CEO"),
        titles=("CEO", "Founder"),
    ),
    _person(
        "Dario Amodei",
        r"\b(?:dario\s+)?amodei\b|\banthropic\s+ceo\b",
        "tech",
        aliases=("Amodei", "Anthropic CEO"),
        titles=("CEO", "Co-founder"),
    ),
    _person(
        "Demis Hassabis",
        r"\b(?:demis\s+)?hassabis\b",
        "tech",
        aliases=("Hassabis",),
        titles=("CEO", "Co-founder"),
    ),
    _person(
        "Andy Jassy",
        r"\b(?:andy\s+)?jassy\b|\bamazon\s+ceo\b",
        "tech",
        aliases=("Jassy", "Amazon CEO"),
        titles=("CEO",),
    ),
    _person(
        "Lisa Su",
        r"\blisa\s+su\b|\bamd\s+ceo\b",
        "tech",
        aliases=("Lisa Su", "AMD CEO"),
        titles=("CEO",),
    ),
    # Finance and business
    _person(
        "Warren Buffett",
        r"\b(?:warren\s+)?buffett\b|\boracle\s+of\s+omaha\b",
        "finance",
        aliases=("Buffett", "Oracle of Omaha"),
        titles=("Chairman",),
    ),
    _person(
        "Jamie Dimon",
        r"\b(?:jamie\s+)?dimon\b|\bjp\s*morgan\s+(?:chase\s+)?ceo\b",
        "finance",
        aliases=("Dimon", "JPMorgan CEO"),
        titles=("CEO", "Chairman"),
    ),
    _person(
        "Larry Fink",
        r"\blarry\s+fink\b|\bblackrock\s+ceo\b",
        "finance",
        aliases=("Fink", "BlackRock CEO"),
        titles=("CEO", "Chairman"),
    ),
    _person(
        "Ray Dalio",
        r"\b(?:ray\s+)?dalio\b",
        "finance",
        aliases=("Dalio",),
        titles=("Founder",),
    ),
    _person(
        "Cathie Wood",
        r"\bcathie\s+wood\b|\bark\s+invest\b",
        "finance",
        aliases=("Cathie Wood", "ARK Invest"),
        titles=("CEO", "CIO"),
    ),
    _person(
        "Michael Saylor",
        r"\b(?:michael\s+)?saylor\b",
        "finance",
        aliases=("Saylor",),
        titles=("Executive Chairman",),
    ),
    # Media
    _person(
        "Tucker Carlson",
        r"\b(?:tucker\s+)?carlson\b",
        "media",
        aliases=("Carlson", "Tucker"),
        titles=("Host",),
    ),
    _person(
        "Joe Rogan",
        r"\b(?:joe\s+)?rogan\b",
        "media",
        aliases=("Rogan", "JRE"),
        titles=("Podcaster",),
    ),
    _person(
        "Jordan Peterson",
        r"\bjordan\s+peterson\b|\bdr\.?\s+peterson\b",
        "media",
        aliases=("Jordan Peterson",),
        titles=("Professor",),
    ),
    _person(
        "Ben Shapiro",
        r"\b(?:ben\s+)?shapiro\b",
        "media",
        aliases=("Shapiro",),
        titles=("Host",),
    ),
)


@dataclass(frozen=True)
class DetectorConfig:
    """One versioned detector table, shared read-only by the analyzers."""

    topics: tuple[CorrelationTopic, ...] = CORRELATION_TOPICS
    narratives: tuple[NarrativePattern, ...] = NARRATIVE_PATTERNS
    people: tuple[PersonPattern, ...] = PERSON_PATTERNS
    source_types: SourceTypes = field(default=SOURCE_TYPES)
    sentiment: SentimentIndicators = field(default=SENTIMENT_INDICATORS)
    version: str = "builtin"

    def get_topic(self, topic_id: str) -> CorrelationTopic | None:
        for topic in self.topics:
            if topic.id == topic_id:
                return topic
        return None

    def get_narrative(self, narrative_id: str) -> NarrativePattern | None:
        for narrative in self.narratives:
            if narrative.id == narrative_id:
                return narrative
        return None

    def get_person(self, name: str) -> PersonPattern | None:
        for person in self.people:
            if person.name == name:
                return person
        return None


DEFAULT_CONFIG = DetectorConfig()
