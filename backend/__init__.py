"""
Web3 Journey GraphQL Gateway Backend

Single FastAPI service with:
- Gateway: recognize GetGreeting / GetMCPData / chatWithAI by their markers
- Providers: DeepSeek → OpenAI → Mock fallback for chat
- Transport: CORS preflight, envelopes, playground page
"""
