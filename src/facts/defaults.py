"""Built-in fact set used until the bundled file loads, and whenever it can't."""

from facts.models import Fact

_DEFAULTS = [
    ("The best startup ideas seem like bad ideas at first", "business", "Peter Thiel",
     "If it were obviously good, someone would already be doing it"),
    ("Competition is for losers", "business", "Zero to One",
     "Monopolies drive progress by having resources to innovate"),
    ("The most contrarian thing is not to oppose the crowd but to think for yourself", "philosophy",
     "Peter Thiel", "True contrarianism isn't reflexive opposition"),
    ("Moving fast and breaking things is often slower than being deliberate", "technology",
     "Contrarian Tech", "Technical debt compounds faster than development speed"),
    ("The best time to start a company is during a recession", "economics", "Startup Wisdom",
     "Less competition, cheaper talent, and forced efficiency"),
    ("Being first to market is overrated", "business", "Business Strategy",
     "Being last can mean learning from everyone else's mistakes"),
    ("Formal education can limit innovative thinking", "education", "Innovation Studies",
     "Credentials create conformity; breakthroughs require unlearning"),
    ("The sharing economy isn't about sharing", "economics", "Economic Analysis",
     "It's about monetizing underutilized assets"),
    ("Social networks make us less social", "society", "Digital Culture",
     "Digital connections often replace deeper real relationships"),
    ("AI won't replace humans, but humans using AI will replace those who don't", "future",
     "Tech Trends", "The divide isn't human vs machine, but augmented vs unaugmented"),
    ("Perfectionism is a form of procrastination", "philosophy", "Productivity Paradox",
     "The pursuit of perfect prevents the achievement of good enough"),
    ("Working harder is often less effective than working less", "business", "Productivity Research",
     "Constraints force creativity and prevent burnout"),
    ("The most valuable companies create new markets, not compete in existing ones", "innovation",
     "Blue Ocean Strategy", "Competition validates markets but limits profits"),
    ("Transparency can reduce trust", "society", "Organizational Psychology",
     "Some ambiguity allows for benefit of the doubt"),
    ("The best investment is often in what everyone else hates", "economics", "Contrarian Investing",
     "Consensus creates overvaluation; pessimism creates opportunity"),
]


def default_facts() -> list[Fact]:
    return [
        Fact(text=text, category=category, source=source, contrary_insight=insight)
        for text, category, source, insight in _DEFAULTS
    ]


DEFAULT_FACTS: list[Fact] = default_facts()
