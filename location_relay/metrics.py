import logging

class Metrics:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Metrics, cls).__new__(cls)
            cls._instance.reset()
        return cls._instance

    def reset(self):
        self.api_calls = 0
        self.successful_responses = 0
        self.failed_responses = 0
        self.validation_failures = 0
        self.send_failures = 0

    def log_metrics(self):
        logging.info(f"Logging Metrics - API Calls: {self.api_calls}")
        logging.info(f"Logging Metrics - Successful Responses: {self.successful_responses}")
        logging.info(f"Logging Metrics - Failed Responses: {self.failed_responses}")
        logging.info(f"Logging Metrics - Validation Failures: {self.validation_failures}")
        logging.info(f"Logging Metrics - Send Failures: {self.send_failures}")

metrics = Metrics()
