import requests
import os
from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# Configurações
MURF_API_KEY = os.getenv("MURF_API_KEY")
MURF_BASE_URL = os.getenv("MURF_BASE_URL", "https://api.murf.ai/v1/speech")

def check_murf_api():
    # URL do endpoint
    voices_url = f"{MURF_BASE_URL}/voices"

    # Headers
    headers = {
        "api-key": MURF_API_KEY or "",
        "Content-Type": "application/json"
    }

    try:
        # Fazer a requisição
        response = requests.get(voices_url, headers=headers, timeout=30)

        # Imprimir detalhes da resposta
        print(f"Status Code: {response.status_code}")
        print(f"Response Body: {response.text[:2000]}")

        # Verificar se deu erro
        response.raise_for_status()

    except requests.exceptions.RequestException as e:
        print(f"Erro na requisição: {str(e)}")

if __name__ == "__main__":
    check_murf_api()
