"""
Default Communities Configuration
This config defines the communities every deployment starts with.
Used by the bootstrap service and the seed script; existing communities are never overwritten.
"""

from typing import Tuple

from app.modules.communities.schemas import CommunityCreate

DEFAULT_COMMUNITIES: Tuple[CommunityCreate, ...] = (
    CommunityCreate(
        id="global-chat",
        name="Global Chat",
        description=(
            "General discussion room for all topics and community introductions. "
            "This is the main hub where verified humans can connect, share ideas, "
            "and engage in meaningful conversations about any subject."
        ),
        color="bg-primary",
        category="General",
        rules=[
            "Be respectful and kind to all community members",
            "No spam, self-promotion, or off-topic content",
            "Keep discussions constructive and meaningful",
            "Report inappropriate behavior to moderators",
        ],
        moderators=["@CommunityMod", "@GlobalAdmin"],
    ),
    CommunityCreate(
        id="developer",
        name="Developer",
        description=(
            "Technical discussions, code reviews, and development help. "
            "Share your projects, ask for advice, and collaborate with fellow "
            "developers on various programming languages and technologies."
        ),
        color="bg-emerald-500",
        category="Technology",
        rules=[
            "Share code snippets and technical resources",
            "Help others with programming questions",
            "No job postings without prior approval",
            "Keep discussions technical and relevant",
        ],
        moderators=["@DevLead", "@TechModerator"],
    ),
    CommunityCreate(
        id="world-news",
        name="World News",
        description=(
            "Global news, current events, and world affairs discussion. "
            "Stay informed about what's happening around the world and engage "
            "in thoughtful discussions about current events."
        ),
        color="bg-blue-500",
        category="News",
        rules=[
            "Share credible news sources only",
            "Maintain civil discourse on sensitive topics",
            "No misinformation or conspiracy theories",
            "Fact-check before sharing information",
        ],
        moderators=["@NewsEditor", "@FactChecker"],
    ),
    CommunityCreate(
        id="ai-tech",
        name="AI & Tech",
        description=(
            "Artificial intelligence, technology innovations, and future trends. "
            "Explore the latest developments in AI, discuss emerging technologies, "
            "and share insights about the future of tech."
        ),
        color="bg-purple-500",
        category="Technology",
        rules=[
            "Share AI research and tech innovations",
            "Discuss ethical implications of technology",
            "No fear-mongering about AI",
            "Support claims with credible sources",
        ],
        moderators=["@AIResearcher", "@TechExpert"],
    ),
    CommunityCreate(
        id="qa",
        name="Q&A",
        description=(
            "Questions, answers, and knowledge sharing from the community. "
            "Ask anything you're curious about and help others by sharing "
            "your knowledge and expertise."
        ),
        color="bg-amber-500",
        category="Help & Support",
        rules=[
            "Ask clear and specific questions",
            "Provide helpful and accurate answers",
            "Search before asking duplicate questions",
            "Thank contributors for their help",
        ],
        moderators=["@KnowledgeKeeper", "@HelpModerator"],
    ),
    CommunityCreate(
        id="announcements",
        name="Announcements",
        description=(
            "Official updates, news, and important platform announcements. "
            "Stay up to date with the latest Forum features, policy changes, "
            "and community updates."
        ),
        color="bg-orange-500",
        category="Official",
        rules=[
            "Official announcements only",
            "Read announcements before asking questions",
            "Provide feedback constructively",
            "Follow new guidelines promptly",
        ],
        moderators=["@ForumTeam", "@CommunityManager"],
    ),
)

DEFAULT_COMMUNITY_IDS: Tuple[str, ...] = tuple(c.id for c in DEFAULT_COMMUNITIES)
