from src.school_demo.school_demo.main import run

if __name__ == "__main__":
    run()
