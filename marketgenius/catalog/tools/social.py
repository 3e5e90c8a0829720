"""Social media tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, select, text, textarea
from marketgenius.prompts.content_types import CampaignGoal, ContentType, ToneOfVoice
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC, TRANSFORMER = ComponentType.GENERIC, ComponentType.TRANSFORMER

SOCIAL_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        200, "Social media post with notes", "Create a social media post with notes.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_POST_WITH_NOTES,
        inputs=(
            textarea(TOPIC, "Core Message / Notes", "Key points for the post..."),
            text(TONE, "Tone", "e.g., Witty, Professional"),
            text(GOAL, "Platform", "e.g., LinkedIn, Instagram"),
        ),
    ),
    ToolDescriptor(
        201, "Social media post with link", "Create a social media post with a link.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_POST_WITH_LINK,
        inputs=(
            text(TOPIC, "Link URL", "https://example.com/article"),
            textarea(AUDIENCE, "Post Commentary", "Check out this great article!"),
            text(TONE, "Tone", "e.g., Excited"),
            text(GOAL, "Platform", "e.g., X (Twitter)"),
        ),
    ),
    ToolDescriptor(
        202, "Social media post with a theme", "Create a social media post with a theme or keyword.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_POST_WITH_THEME,
        inputs=(
            text(TOPIC, "Theme or Keyword", 'e.g., "Monday Motivation"'),
            text(TONE, "Tone", "e.g., Inspirational"),
            text(GOAL, "Platform", "e.g., Facebook"),
        ),
    ),
    ToolDescriptor(
        203, "X thread from a blog or webpage", "Create an X thread based on a blog post or webpage.", ("Social Media", "Repurpose"), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.X_THREAD_FROM_BLOG,
        inputs=(textarea(TOPIC, "Pasted Blog/Webpage Content", "Paste content here...", rows=10),),
    ),
    ToolDescriptor(
        204, "X thread from a theme", "Create an X thread based on a theme.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.X_THREAD_FROM_THEME,
        inputs=(
            text(TOPIC, "Theme", 'e.g., "The future of remote work"'),
            text(TONE, "Tone", 'e.g., "Thought-provoking"'),
        ),
    ),
    ToolDescriptor(
        205, "Social media poll", "Create a Linkedin or X poll based on a theme.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_MEDIA_POLL,
        inputs=(
            text(TOPIC, "Topic / Question for Poll", 'e.g., "What is the most important skill for marketers in 2024?"'),
            text(AUDIENCE, "Platform", "e.g., LinkedIn"),
        ),
    ),
    ToolDescriptor(
        206, "Social media page introduction", "Create a social media page introduction based on notes.", ("Social Media", "Copy"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_MEDIA_PAGE_INTRODUCTION,
        inputs=(
            text(TOPIC, "Business/Person Name", 'e.g., "Acme Innovations"'),
            textarea(AUDIENCE, "Key Information/Notes", "We sell eco-friendly widgets..."),
            text(TONE, "Platform", "e.g., Instagram Bio"),
        ),
    ),
    ToolDescriptor(
        207, "Social media post with quote", "Create a social media post with a quote from a popular figure.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_POST_WITH_QUOTE,
        inputs=(
            text(TOPIC, "Quote by", 'e.g., "Steve Jobs"'),
            textarea(AUDIENCE, "Pasted Quote", "Paste the quote here..."),
            text(TONE, "Your Commentary", 'e.g., "This really resonates because..."'),
            text(GOAL, "Platform", "e.g., LinkedIn"),
        ),
    ),
    ToolDescriptor(
        208, "Memes", "Generate meme ideas and captions.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.MEMES,
        inputs=(
            text(TOPIC, "Topic for Meme", 'e.g., "Monday morning meetings"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Office workers"'),
        ),
    ),
    ToolDescriptor(
        209, "Social media post for holiday or special day", "Create a holiday or special day social media post.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SOCIAL_HOLIDAY_POST,
        inputs=(
            text(TOPIC, "Holiday / Special Day", 'e.g., "World Environment Day"'),
            text(AUDIENCE, "Key Message", 'e.g., "Highlighting our commitment to sustainability"'),
            text(TONE, "Tone", 'e.g., "Hopeful"'),
            text(GOAL, "Platform", 'e.g., "Instagram"'),
        ),
    ),
    ToolDescriptor(
        702, "Tweet thread", "Turn a topic into a numbered thread with a strong hook and a call to action.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.TWEET_THREAD,
        inputs=(
            text(TOPIC, "Topic", 'e.g., "Lessons from bootstrapping a SaaS"'),
            text(AUDIENCE, "Audience", 'e.g., "Indie hackers"'),
            select(TONE, "Tone", ToneOfVoice),
            select(GOAL, "Goal", CampaignGoal),
        ),
    ),
    ToolDescriptor(
        703, "LinkedIn post", "Write a professional LinkedIn post with value-driven points and hashtags.", ("Social Media",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.LINKEDIN_POST,
        inputs=(
            text(TOPIC, "Topic", 'e.g., "What we learned from our first product launch"'),
            text(AUDIENCE, "Target Audience", 'e.g., "B2B marketers"'),
            select(TONE, "Tone", ToneOfVoice),
            select(GOAL, "Goal", CampaignGoal),
        ),
    ),
]
