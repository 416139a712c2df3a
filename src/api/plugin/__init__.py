"""Fronteira com o host do planner.

Módulos:
- exports: `import_events` e `meta`, os dois exports invocados pelo host
- meta: descritor estático do plugin e allow-list de rede
- cli: entrypoint de processo (stdin/stdout)

Importe os exports diretamente de `api.plugin.exports`.
"""
