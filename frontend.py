from src.school_demo.school_demo.proxy.app import run

if __name__ == "__main__":
    run()
