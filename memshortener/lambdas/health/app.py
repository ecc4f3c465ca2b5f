from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.utils.responses import response_200


def lambda_handler(event: LambdaEvent, context: LambdaContext, *, dao: ShortURLBaseDAO, config: LambdaConfiguration) -> LambdaResponse:
    return response_200({'status': 'ok', 'service': config['service_name']})
