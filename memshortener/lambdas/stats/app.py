from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.utils import guarantee_500_response
from memshortener.utils.responses import response_200


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, *, dao: ShortURLBaseDAO, config: LambdaConfiguration) -> LambdaResponse:
    """Respond with registry totals taken from a single consistent snapshot"""
    stats = dao.stats()
    return response_200(
        {
            'total_urls': stats.total_records,
            'next_id': stats.next_id,
            'total_accesses': stats.total_accesses,
        }
    )
