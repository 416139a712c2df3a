"""API: camada de borda do plugin.

Responsabilidades:
- Expor os exports invocados pelo host (import_events, meta)
- Decodificar respostas da fonte externa em modelos internos
- Normalizar registros da fonte em eventos de calendário

Subpastas:
- normalizers/: conversão de respostas externas -> modelos internos
- plugin/: exports, descritor do plugin e entrypoint de processo

NÃO PODE conter: IO direto com a fonte ou com o host (isso é app/infra).
"""
