"""
Static English word tables for the statement parser.

Verbs are stored in their base (imperative) form only, since task statements
lead with a bare imperative. The concept and conjunction tables are generated
data and live as JSON under graphdl/data/.
"""

# -----------------------------------------------------------------------------
# --- Verbs (base form)
# -----------------------------------------------------------------------------

KNOWN_VERBS = {
    # Planning and direction
    "plan", "direct", "coordinate", "supervise", "manage", "oversee", "lead",
    "guide", "administer", "control", "organize", "schedule", "prioritize",
    "delegate", "assign", "allocate", "authorize", "approve", "establish",
    "set", "define", "determine", "formulate", "devise", "design", "develop",
    "implement", "execute", "conduct", "perform", "carry", "initiate",
    "launch", "align", "integrate", "structure", "restructure", "reorganize",
    "confer", "consult", "collaborate", "cooperate", "negotiate", "mediate",
    "arbitrate", "facilitate", "represent", "advocate", "promote", "market",
    "sell", "purchase", "buy", "procure", "acquire", "order", "requisition",
    "contract", "lease", "rent", "budget", "finance", "fund", "invest",

    # Analysis and evaluation
    "analyze", "assess", "evaluate", "review", "examine", "inspect", "audit",
    "investigate", "research", "study", "survey", "measure", "estimate",
    "calculate", "compute", "compare", "forecast", "predict", "project",
    "model", "simulate", "test", "verify", "validate", "check", "monitor",
    "track", "observe", "identify", "diagnose", "detect", "discover",
    "interpret", "synthesize", "summarize", "classify", "categorize",
    "rank", "rate", "score", "grade", "appraise", "benchmark", "explore",
    "consider", "judge", "decide", "resolve", "solve", "troubleshoot",

    # Communication and reporting
    "report", "present", "communicate", "inform", "notify", "advise",
    "recommend", "explain", "describe", "discuss", "brief", "answer",
    "respond", "reply", "correspond", "write", "draft", "edit", "revise",
    "prepare", "publish", "distribute", "disseminate", "document", "record",
    "file", "log", "register", "enter", "post", "submit", "forward",
    "transmit", "send", "deliver", "provide", "supply", "furnish", "issue",
    "announce", "publicize", "demonstrate", "illustrate", "teach", "train",
    "instruct", "educate", "coach", "mentor", "counsel", "tutor", "lecture",

    # Maintenance, production and operations
    "maintain", "repair", "fix", "service", "clean", "adjust", "calibrate",
    "install", "assemble", "construct", "build", "fabricate", "manufacture",
    "produce", "process", "operate", "run", "start", "stop", "load",
    "unload", "move", "transport", "ship", "store", "stock", "pack",
    "package", "label", "mark", "sort", "arrange", "position", "place",
    "mount", "attach", "connect", "disconnect", "remove", "replace",
    "upgrade", "update", "modify", "alter", "change", "convert",
    "configure", "program", "operate", "handle", "dispose", "recycle",
    "collect", "gather", "compile", "obtain", "retrieve", "receive",
    "accept", "reject", "weigh", "cut", "mix", "measure", "apply",
    "excavate", "drill", "dig", "lift", "pour", "paint", "coat", "seal",

    # Support, compliance and people work
    "ensure", "secure", "protect", "enforce", "comply", "conform", "adhere",
    "regulate", "certify", "license", "inspect", "assist", "support", "help",
    "serve", "aid", "care", "treat", "refer", "recruit", "hire", "interview",
    "select", "screen", "evaluate", "motivate", "encourage", "reward",
    "discipline", "dismiss", "terminate", "retain", "engage", "involve",
    "participate", "attend", "meet", "visit", "travel", "contact", "call",
    "greet", "welcome", "escort", "accompany", "observe", "supervise",

    # Change and improvement
    "improve", "enhance", "increase", "reduce", "decrease", "minimize",
    "maximize", "optimize", "streamline", "simplify", "standardize",
    "automate", "expand", "extend", "grow", "create", "generate", "innovate",
    "invent", "originate", "introduce", "adapt", "customize", "tailor",
    "transform", "redesign", "reengineer", "modernize", "prevent", "avoid",
    "mitigate", "address", "correct", "remedy", "restore", "recover",
    "achieve", "accomplish", "attain", "complete", "finalize", "close",
    "achieve", "sustain", "preserve", "conserve", "balance", "reconcile",
    "verify", "approve", "sign", "endorse", "specify", "select", "choose",
    "maintain", "use", "utilize", "employ", "deploy", "leverage", "exercise",
    "find", "locate", "search", "follow", "obey", "observe", "interpret",
}

# -----------------------------------------------------------------------------
# --- Closed-class words
# -----------------------------------------------------------------------------

KNOWN_PREPOSITIONS = {
    "about", "above", "across", "after", "against", "along", "among",
    "around", "at", "before", "behind", "below", "beneath", "beside",
    "between", "beyond", "by", "despite", "during", "except", "for", "from",
    "in", "inside", "into", "near", "of", "off", "on", "onto", "outside",
    "over", "per", "since", "through", "throughout", "to", "toward",
    "towards", "under", "until", "upon", "via", "with", "within", "without",
}

KNOWN_DETERMINERS = {
    "a", "an", "the",                         # articles
    "this", "that", "these", "those",         # demonstratives
    "my", "your", "his", "her", "its", "our", "their",  # possessives
    "some", "any", "all", "each", "every", "no", "none",
    "few", "many", "much", "several",
    "more", "most", "less", "least",          # comparatives
}

KNOWN_PRONOUNS = {
    "i", "me", "you", "he", "him", "she", "it", "we", "us", "they", "them",
    "myself", "yourself", "himself", "herself", "itself", "ourselves",
    "themselves", "oneself", "others", "someone", "anyone", "everyone",
}

KNOWN_ADVERBS = {
    "accurately", "appropriately", "continuously", "directly", "effectively",
    "efficiently", "independently", "individually", "periodically",
    "promptly", "regularly", "routinely", "safely", "thoroughly",
}

# Empty by default: an adjective in front of a complement would be moved into
# the modifiers list and out of the complement slot.
KNOWN_ADJECTIVES = set()
