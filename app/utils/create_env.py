"""
Template das variáveis de ambiente.
Copie para .env e substitua pelos valores reais.
"""

ENV_TEMPLATE = """
# Murf API Configuration
MURF_API_KEY=your_murf_api_key
MURF_BASE_URL=https://api.murf.ai/v1/speech
MURF_AUDIO_FORMAT=MP3
MURF_TIMEOUT_SECONDS=30

# Voz padrão (usada quando a lista de vozes não carrega)
MURF_DEFAULT_VOICE_ID=en-US-daisy
MURF_DEFAULT_VOICE_NAME=Daisy
MURF_DEFAULT_VOICE_LOCALE=en-US

# Sessões da interface
SESSION_TTL_MINUTES=120
SESSION_COOKIE_NAME=murf_session
"""

def create_env_file(path: str = '.env'):
    """Cria um novo arquivo .env com os valores do template."""
    with open(path, 'w') as f:
        f.write(ENV_TEMPLATE.strip() + '\n')

if __name__ == '__main__':
    create_env_file()
