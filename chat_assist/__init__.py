"""chat-assist: personality-voiced chat replies with a provider fallback chain."""
