"""
Google Gemini API Client

Sends the campaign list to Gemini for a one-shot optimization report.

One request, one response: no retries, no streaming. Every failure is turned
into a fixed fallback message by InsightsRequestor, so callers can always
render the returned text.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import requests

from meliads.config import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS, Settings, load_settings
from meliads.core.models import Campaign, InsightsResult, InsightsStatus

logger = logging.getLogger(__name__)

NO_ANALYSIS_FALLBACK = "Não foi possível gerar a análise no momento."
ERROR_FALLBACK = "Ocorreu um erro ao conectar com a IA para análise. Verifique sua chave API."


class InsightsError(Exception):
    """Transport, HTTP or payload failure talking to the generation endpoint."""
    pass


def project_campaign(campaign: Campaign) -> Dict[str, Any]:
    """Fields of a campaign sent to the model."""
    return {
        'name': campaign.name,
        'status': campaign.status.value,
        'spend': campaign.spend,
        'revenue': campaign.revenue,
        'acos': round(campaign.acos, 2),
        'roas': round(campaign.roas, 2),
        'clicks': campaign.clicks,
        'impressions': campaign.impressions,
    }


def build_insights_prompt(campaigns: Iterable[Campaign]) -> str:
    """Build the analyst prompt with the campaigns embedded as JSON."""
    data_string = json.dumps(
        [project_campaign(c) for c in campaigns],
        indent=2,
        ensure_ascii=False,
    )

    prompt = f"""Atue como um especialista sênior em Mercado Ads (Mercado Livre).
Analise os seguintes dados de campanha em JSON:
{data_string}

Forneça uma análise estratégica em formato Markdown.
1. Identifique as "Estrelas" (Alto ROAS, Baixo ACOS).
2. Identifique os "Sangramentos" (Alto Gasto, Alto ACOS > 30%, Baixo Retorno).
3. Identifique campanhas "Estagnadas" (Muitas impressões, poucos cliques/vendas).
4. Sugira 3 ações concretas e imediatas para melhorar a rentabilidade geral da conta.

Seja direto, profissional e use formatação rica (negrito, listas). Fale em Português do Brasil.
"""
    return prompt


class GeminiClient:
    """Client for the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.insights_timeout,
            base_url=settings.gemini_base_url,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the generated text ('' when the model
        returned no text).

        Raises:
            InsightsError: On missing key, transport error, non-200 or bad payload
        """
        response = self._call_api(prompt)
        return self._parse_response(response)

    def _call_api(self, prompt: str) -> Dict:
        if not self.api_key:
            raise InsightsError("GEMINI_API_KEY is not configured")

        headers = {
            "x-goog-api-key": self.api_key,
            "content-type": "application/json",
        }

        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "thinkingConfig": {"thinkingBudget": 0}
            },
        }

        try:
            response = self.session.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise InsightsError(f"Failed to call Gemini API: {e}") from e

        if response.status_code != 200:
            raise InsightsError(f"API error: {response.status_code} - {response.text[:500]}")

        try:
            return response.json()
        except ValueError as e:
            raise InsightsError(f"Gemini API returned invalid JSON: {e}") from e

    def _parse_response(self, response: Dict) -> str:
        """Concatenate the text parts of the first candidate."""
        if not isinstance(response, dict):
            raise InsightsError("Unexpected Gemini response shape")

        candidates = response.get('candidates') or []
        if not isinstance(candidates, list) or not candidates:
            return ''

        first = candidates[0] if isinstance(candidates[0], dict) else {}
        content = first.get('content')
        if not isinstance(content, dict):
            return ''

        parts = content.get('parts') or []
        texts: List[str] = [p['text'] for p in parts if isinstance(p, dict) and isinstance(p.get('text'), str)]
        return ''.join(texts).strip()


class InsightsRequestor:
    """
    Turns the campaign list into a report string.

    request() never raises: a missing answer or any client failure becomes
    a FAILED result carrying one of the fallback messages.
    """

    def __init__(self, client: GeminiClient):
        self.client = client

    def request(self, campaigns: Iterable[Campaign]) -> InsightsResult:
        campaigns = list(campaigns)
        prompt = build_insights_prompt(campaigns)
        logger.info("Requesting insights for %d campaigns from %s", len(campaigns), self.client.model)

        try:
            text = self.client.generate(prompt)
        except InsightsError as e:
            logger.error("Error calling Gemini: %s", e)
            return InsightsResult(InsightsStatus.FAILED, ERROR_FALLBACK)

        if not text:
            logger.warning("Gemini returned no text for the insights prompt")
            return InsightsResult(InsightsStatus.FAILED, NO_ANALYSIS_FALLBACK)

        return InsightsResult(InsightsStatus.SUCCEEDED, text)


def analyze_campaigns(
    campaigns: Iterable[Campaign],
    requestor: Optional[InsightsRequestor] = None,
) -> str:
    """
    Generate the markdown optimization report for the campaigns.

    Args:
        campaigns: Campaign records
        requestor: Requestor to use (built from environment settings if None)

    Returns:
        Generated markdown, or a fallback message on failure
    """
    if requestor is None:
        try:
            settings = load_settings()
        except ValueError as e:
            logger.error("Invalid insights configuration: %s", e)
            return ERROR_FALLBACK
        requestor = InsightsRequestor(GeminiClient.from_settings(settings))
    return requestor.request(campaigns).text
