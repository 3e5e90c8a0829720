"""Social media templates."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


@template(ContentType.TWEET_THREAD, topic="topic", audience="audience", tone="tone", goal="goal")
def tweet_thread(*, topic: str, audience: str, tone: str, goal: str) -> str:
    return (
        "You are a viral social media manager. Create a compelling Twitter thread.\n\n"
        f"**Topic:** {topic}\n"
        f"**Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        f"**Goal:** {goal}\n\n"
        "**Instructions:**\n"
        "1. Write a powerful hook for the first tweet to grab attention.\n"
        "2. Break down the topic into 5-8 numbered tweets.\n"
        "3. Keep each tweet concise and impactful.\n"
        "4. Use relevant hashtags and emojis.\n"
        "5. End with a concluding tweet that summarizes the thread and includes a call to action.\n"
        'Format the output clearly separating each tweet (e.g., "1/8:", "2/8:", etc.).'
    )


@template(ContentType.LINKEDIN_POST, topic="topic", audience="audience", tone="tone", goal="goal")
def linkedin_post(*, topic: str, audience: str, tone: str, goal: str) -> str:
    return (
        "You are a B2B marketing expert and LinkedIn thought leader. Write a professional "
        "and engaging LinkedIn post.\n\n"
        f"**Topic:** {topic}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        f"**Goal:** {goal}\n\n"
        "**Instructions:**\n"
        "1. Start with a strong hook to stop the scroll.\n"
        "2. Elaborate on the topic with 3-5 clear, value-driven points. Use bullet points or numbered lists.\n"
        "3. Pose a question to encourage comments and engagement.\n"
        "4. Include 3-5 relevant hashtags.\n"
        "5. Keep the post professional and aligned with the LinkedIn platform.\n"
        "Format the output as a single, ready-to-publish post."
    )


@template(ContentType.SOCIAL_POST_WITH_NOTES, topic="notes", tone="tone", goal="platform")
def post_with_notes(*, notes: str, tone: str, platform: str) -> str:
    return (
        "You are a social media manager. Create a social media post based on the provided "
        "notes and add your own strategic notes for posting.\n"
        f"**Platform:** {platform}\n"
        "**Core Message/Notes:**\n"
        f"{fenced(notes)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Write a compelling social media post for the specified platform.\n"
        '2. Below the post, add a "Manager\'s Notes" section with recommendations for '
        "hashtags, best time to post, and potential visuals.\n"
        "3. Format the entire output in Markdown."
    )


@template(ContentType.SOCIAL_POST_WITH_LINK, topic="url", audience="commentary", tone="tone", goal="platform")
def post_with_link(*, url: str, commentary: str, tone: str, platform: str) -> str:
    return (
        "You are a content curator. Write a social media post that introduces and shares a link.\n"
        f"**Link URL:** {url}\n"
        "**Post Commentary/Context:**\n"
        f"{fenced(commentary)}\n"
        f"**Tone:** {tone}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Write a caption that provides context or a compelling hook for the link.\n"
        "2. Encourage clicks and discussion.\n"
        "3. Include 3-5 relevant hashtags."
    )


@template(ContentType.SOCIAL_POST_WITH_THEME, topic="theme", tone="tone", goal="platform")
def post_with_theme(*, theme: str, tone: str, platform: str) -> str:
    return (
        "You are a creative social media content creator. Write a social media post based on a theme.\n"
        f"**Theme/Keyword:** {theme}\n"
        f"**Tone:** {tone}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Craft an engaging post that captures the essence of the theme.\n"
        "2. Include relevant emojis and 3-5 hashtags.\n"
        "3. Format as a ready-to-publish post."
    )


@template(ContentType.SOCIAL_HOLIDAY_POST, topic="holiday", audience="message", tone="tone", goal="platform")
def holiday_post(*, holiday: str, message: str, tone: str, platform: str) -> str:
    return (
        "You are a brand's social media manager. Create a post for an upcoming holiday or special day.\n"
        f"**Holiday/Special Day:** {holiday}\n"
        f"**Key Message:** {message}\n"
        f"**Tone:** {tone}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Write a creative and appropriate post celebrating the day.\n"
        "2. Connect the holiday to the brand's message if possible.\n"
        "3. Include relevant hashtags."
    )


@template(ContentType.X_THREAD_FROM_BLOG, topic="content")
def x_thread_from_blog(*, content: str) -> str:
    return (
        "You are an expert at repurposing content. Convert the following blog post/webpage "
        "content into a viral X (Twitter) thread.\n"
        "**Pasted Blog/Webpage Content:**\n"
        f"{fenced(content)}\n"
        "**Instructions:**\n"
        "1. Create a powerful hook tweet (1/n).\n"
        "2. Break down the key points of the content into a thread of 5-10 tweets.\n"
        "3. Number each tweet (e.g., 1/8, 2/8).\n"
        "4. Use emojis and simple language.\n"
        "5. End with a concluding tweet and a call to action."
    )


@template(ContentType.X_THREAD_FROM_THEME, topic="theme", tone="tone")
def x_thread_from_theme(*, theme: str, tone: str) -> str:
    return (
        "You are a skilled X (Twitter) writer. Create a compelling thread based on a theme.\n"
        f"**Theme:** {theme}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Write a strong hook tweet (1/n).\n"
        "2. Develop the theme across 5-8 tweets.\n"
        "3. Provide value, insights, or a story.\n"
        "4. Number each tweet and use relevant hashtags."
    )


@template(ContentType.SOCIAL_MEDIA_POLL, topic="question", audience="platform")
def social_media_poll(*, question: str, platform: str) -> str:
    return (
        "You are an engaging social media manager. Create a poll for LinkedIn or X.\n"
        f"**Topic/Question:** {question}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Write a brief, engaging intro for the poll.\n"
        "2. Provide 2-4 clear, concise poll options.\n"
        "3. Format it clearly, separating the intro from the options."
    )


@template(ContentType.SOCIAL_MEDIA_PAGE_INTRODUCTION, topic="name", audience="notes", tone="platform")
def page_introduction(*, name: str, notes: str, platform: str) -> str:
    return (
        "Write a compelling introduction or bio for a social media page.\n"
        f"**Business/Person Name:** {name}\n"
        "**Key Information/Notes:**\n"
        f"{fenced(notes)}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Concisely describe who you are and what you do.\n"
        "2. Highlight your value proposition.\n"
        '3. Include a call to action (e.g., "Follow for tips," "Visit our site").\n'
        "4. Keep it within the character limits of the specified platform."
    )


@template(ContentType.SOCIAL_POST_WITH_QUOTE, topic="author", audience="quote", tone="commentary", goal="platform")
def post_with_quote(*, author: str, quote: str, commentary: str, platform: str) -> str:
    return (
        "You are a social media content creator. Create a post centered around a quote.\n"
        f"**Quote by:** {author}\n"
        "**Pasted Quote:**\n"
        f"{fenced(quote)}\n"
        f"**Your Commentary/Context:** {commentary}\n"
        f"**Platform:** {platform}\n"
        "**Instructions:**\n"
        "1. Present the quote clearly.\n"
        "2. Add your own commentary to provide context or a related insight.\n"
        "3. Include relevant hashtags."
    )


@template(ContentType.MEMES, topic="topic", audience="audience")
def memes(*, topic: str, audience: str) -> str:
    return (
        "You are a witty, meme-savvy marketer. Generate 3 meme ideas for a specific topic.\n"
        f"**Topic:** {topic}\n"
        f"**Target Audience:** {audience}\n"
        "**Instructions:**\n"
        "For each idea, provide:\n"
        '1. **Meme Format:** (e.g., "Drakeposting," "Distracted Boyfriend").\n'
        "2. **Top Text/Caption:** The text that goes with the meme.\n"
        "3. **Context:** A brief explanation of why it's funny or relevant to the audience.\n"
        "Format the output clearly for each of the 3 ideas."
    )
