"""Funções serverless no formato Lambda (Netlify Functions, API Gateway)."""
