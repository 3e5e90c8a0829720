"""Tools that open a dedicated view instead of the form runner."""
from __future__ import annotations

from marketgenius.catalog.metadata import LinkedView, ToolDescriptor

VIEW_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(1, "Long blog article", "Generate a blog article from topic or keywords based on word count and tone.", ("Blog",), linked_view=LinkedView.CONTENT),
    ToolDescriptor(2, "AI SEO Content Brief Generator", "Generate content briefs with SEO guidelines like keywords, questions, length, etc.", ("Blog", "SEO"), linked_view=LinkedView.BRIEFS),
    ToolDescriptor(3, "AI Image Generator", "Generate images based on a description and desired style.", ("Images",), linked_view=LinkedView.IMAGE_GEN),
    ToolDescriptor(6, "Search & Repurpose News", "Search latest news and repurpose into a social media post, blog, or a summary.", ("Repurpose", "Social Media"), linked_view=LinkedView.SOCIAL),
    ToolDescriptor(12, "AI Image Editor", 'Edit images using text prompts like "add a retro filter".', ("Images",), linked_view=LinkedView.IMAGE_EDIT),
    ToolDescriptor(13, "AI Speech Generation", "Convert text into high-quality spoken audio (TTS).", ("Other", "Video"), linked_view=LinkedView.SPEECH),
    ToolDescriptor(14, "Marketing strategy planner", "Build a phased campaign strategy with channels, messaging and KPIs.", ("Other",), linked_view=LinkedView.STRATEGY),
    ToolDescriptor(15, "Campaign performance analyst", "Turn raw campaign metrics into a narrative report with recommendations.", ("Other",), linked_view=LinkedView.ANALYST),
    ToolDescriptor(16, "Marvin, your AI marketing strategist", "Chat with an assistant for quick, actionable marketing advice.", ("Other",), linked_view=LinkedView.ASSISTANT),
    ToolDescriptor(17, "Live voice conversation", "Talk through ideas out loud with a real-time voice assistant.", ("Other",), linked_view=LinkedView.LIVE_CHAT),
]

COMING_SOON_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(4, "Bulk product descriptions", "Generate multiple product descriptions with CSV input.", ("Descriptions", "eCommerce"), bulk_enabled=True, linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(5, "Create an AI template", "Create your own AI content template.", ("Other",), linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(7, "Repurpose video or audio", "Repurpose the content from video or audio into another format.", ("Repurpose", "Video"), linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(8, "Royalty free images", "Find royalty free images from platforms like Unsplash, Pexels etc.", ("Images",), linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(9, "GIFs", "Find gifs from Giphy.", ("Images", "Social Media"), linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(10, "Social media post from image", "Create a social media post from an image.", ("Social Media", "Images"), linked_view=LinkedView.COMING_SOON),
    ToolDescriptor(11, "Repurpose image", "Repurpose content from an image or infographic into another format.", ("Repurpose", "Images"), linked_view=LinkedView.COMING_SOON),
]
