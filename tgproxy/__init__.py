"""Proxy de webhooks de push do GitHub -> Telegram, por projeto.

Este pacote contém:
- constants: variáveis de ambiente
- config: carga do mapa projeto -> ProjectConfig (imutável)
- signature: verificação HMAC-SHA256 do corpo bruto
- validation: checagem estrutural do payload de push
- formatters: formatação da mensagem em Markdown
- services: envio para a Bot API do Telegram
- errors: exceções mapeadas para status HTTP
- controller: criação do Flask app e endpoints
"""
