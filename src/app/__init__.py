"""App: orquestração, casos de uso e infraestrutura do plugin.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de job, eventos e erros do pipeline
- use_cases/: importação de eventos (sem IO direto)
- infra/: implementações concretas de IO (HTTP, canais do host)
- protocols/: contratos/interfaces
- observability/: invocation id e métricas em log estruturado

Padrão: app executa; api adapta; config configura; utils apoia.
"""
