"""
Static HTML playground served on GET /graphql.

A textarea, a few sample operations and a fetch() to POST /graphql.
"""

PLAYGROUND_HTML = """
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>GraphQL Playground</title>
  <style>
    body {
      margin: 0;
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', sans-serif;
      background: #1a1a1a;
      color: #fff;
      display: flex;
      flex-direction: column;
      height: 100vh;
    }
    .header {
      background: #2d2d2d;
      padding: 1rem 2rem;
      border-bottom: 2px solid #3b82f6;
    }
    h1 { margin: 0; font-size: 1.5rem; }
    .container { flex: 1; display: flex; overflow: hidden; }
    .panel { flex: 1; display: flex; flex-direction: column; padding: 1rem; }
    textarea {
      flex: 1;
      background: #2d2d2d;
      color: #fff;
      border: 1px solid #444;
      border-radius: 8px;
      padding: 1rem;
      font-family: 'Courier New', monospace;
      font-size: 14px;
      resize: none;
    }
    button {
      background: #3b82f6;
      color: white;
      border: none;
      padding: 0.75rem 1.5rem;
      border-radius: 8px;
      font-size: 1rem;
      cursor: pointer;
      margin-top: 1rem;
    }
    button:hover { background: #2563eb; }
    .examples { background: #2d2d2d; padding: 1rem; border-radius: 8px; margin-top: 1rem; }
    .example { cursor: pointer; padding: 0.5rem; margin: 0.25rem 0; border-radius: 4px; }
    .example:hover { background: #3d3d3d; }
    pre { background: #1a1a1a; padding: 1rem; border-radius: 8px; overflow: auto; }
  </style>
</head>
<body>
  <div class="header">
    <h1>🚀 GraphQL Playground - Web3 Journey</h1>
  </div>
  <div class="container">
    <div class="panel">
      <h3>Query / Mutation</h3>
      <textarea id="query" placeholder="Type a GraphQL operation...">
query GetGreeting {
  greeting
  timestamp
}</textarea>
      <button onclick="executeQuery()">Run</button>

      <div class="examples">
        <h4>Examples:</h4>
        <div class="example" onclick="setQuery('greeting')">📡 Greeting</div>
        <div class="example" onclick="setQuery('mcp')">🔌 MCP data</div>
        <div class="example" onclick="setQuery('ai')">🤖 AI chat</div>
      </div>
    </div>

    <div class="panel">
      <h3>Result</h3>
      <pre id="result">Waiting for a query...</pre>
    </div>
  </div>

  <script>
    const queries = {
      greeting: `query GetGreeting {
  greeting
  timestamp
}`,
      mcp: `query GetMCPData {
  mcpWeather {
    temperature
    condition
    city
  }
  mcpNews {
    title
    summary
  }
}`,
      ai: `mutation ChatWithAI {
  chatWithAI(message: "Hi! Tell me about edge workers") {
    response
    model
    timestamp
  }
}`
    };

    function setQuery(type) {
      document.getElementById('query').value = queries[type];
    }

    async function executeQuery() {
      const query = document.getElementById('query').value;
      const resultEl = document.getElementById('result');

      resultEl.textContent = 'Running...';

      try {
        const response = await fetch('/graphql', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ query })
        });

        const result = await response.json();
        resultEl.textContent = JSON.stringify(result, null, 2);
      } catch (error) {
        resultEl.textContent = 'Error: ' + error.message;
      }
    }
  </script>
</body>
</html>
"""
